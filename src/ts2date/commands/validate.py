"""Command: validate the attribute-list configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ts2date.commands._examples import with_examples

if TYPE_CHECKING:
    from ts2date.commands._context import AppContext


@click.command()
@with_examples("""\
  ts2date validate
  ts2date -a 'created,updated' validate
  ts2date -c pipeline/ts2date.toml --json validate""")
@click.pass_obj
def validate(app: AppContext) -> None:
    """Check that an attribute list is configured."""
    from ts2date.services.filter import FilterService

    app.emit(FilterService(app.settings).validate())
