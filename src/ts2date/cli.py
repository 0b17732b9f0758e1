"""``ts2date`` command-line entry point."""

from __future__ import annotations

from typing import Any

import click

from ts2date import __version__
from ts2date.commands._context import AppContext
from ts2date.commands.convert import convert
from ts2date.commands.process import process
from ts2date.commands.validate import validate
from ts2date.config.settings import Ts2DateSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="ts2date")
@click.option(
    "-a",
    "--attributes",
    metavar="NAMES",
    help="Comma-separated attributes to rewrite; overrides [processor] attributes_list.",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="PATH",
    help="Read this TOML file instead of searching for ts2date.toml.",
)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error details.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.pass_context
def cli(
    ctx: click.Context,
    attributes: str | None,
    config_path: str | None,
    **flags: Any,
) -> None:
    """Rewrite legacy /Date(<millis>)/ record attributes as YYYY-MM-DD dates."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return
    settings = Ts2DateSettings.from_cli(config_path=config_path, attributes=attributes, **flags)
    ctx.obj = AppContext(settings)


for _command in (convert, process, validate):
    cli.add_command(_command)
