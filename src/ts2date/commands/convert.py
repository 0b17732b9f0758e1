"""Command: convert a single legacy date value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ts2date.commands._examples import with_examples

if TYPE_CHECKING:
    from ts2date.commands._context import AppContext


@click.command()
@click.argument("value")
@with_examples("""\
  ts2date convert '/Date(1644364800000)/'
  ts2date -q convert '/Date(379179912000)/'
  ts2date --json convert 'not a date'""")
@click.pass_obj
def convert(app: AppContext, value: str) -> None:
    """Convert VALUE from /Date(<millis>)/ to a local YYYY-MM-DD date."""
    from ts2date.services.filter import FilterService

    app.emit(FilterService(app.settings).convert(value))
