"""Command: run the filter over JSON-lines records."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from ts2date.commands._examples import with_examples

if TYPE_CHECKING:
    from ts2date.commands._context import AppContext


@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.File("w", encoding="utf-8", lazy=False),
    default="-",
    help="Where to write processed records (default: stdout).",
)
@with_examples("""\
  ts2date -a created process records.jsonl
  cat records.jsonl | ts2date -a 'created,updated' process -o out.jsonl
  ts2date -a created --json process records.jsonl -o out.jsonl""")
@click.pass_obj
def process(app: AppContext, input_file: TextIO, output_file: TextIO) -> None:
    """Rewrite /Date(...)/ attributes of records read from INPUT_FILE.

    Each line holds one record: {"attributes": {...}, "content": "..."}.
    Records are written as JSON lines as soon as they are processed. The
    summary, plain or --json, goes to stderr.
    """
    from ts2date.infrastructure.records import read_records, write_record
    from ts2date.services.filter import FilterService

    result = FilterService(app.settings).process_records(
        read_records(input_file),
        sink=lambda record: write_record(record, output_file),
    )
    if result.ok and app.settings.quiet and not app.settings.json_output:
        return
    app.emit(result, summary=True)
