"""AppContext: settings plus result output, shared by all subcommands.

The root group builds one per invocation and subcommands receive it via
``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ts2date.config.logging import configure_logging
from ts2date.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from ts2date.config.settings import Ts2DateSettings
    from ts2date.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: Ts2DateSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult, *, summary: bool = False) -> None:
        """Print *result*; a failed result exits with status 1.

        Failures always go to stderr. A successful result goes to stdout,
        or to stderr when it is the *summary* of a command whose stdout
        carries data. Warnings go to stderr unless the output is JSON,
        which already lists them.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text, err=summary)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
