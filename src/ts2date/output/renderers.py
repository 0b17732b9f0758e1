"""Human-readable rendering of ServiceResult.

Each operation contributes ``(key, value, style)`` rows; unknown ops
list their ``data`` as-is. ``--verbose`` adds ``meta`` on success and the
error ``detail`` on failure.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from rich.text import Text

from ts2date.output.console import capture_text

if TYPE_CHECKING:
    from rich.console import Console

    from ts2date.services.result import ServiceResult

Row = tuple[str, str, str | None]

_PROCESS_COUNTS = ("count", "transferred", "dropped", "converted_attributes")


def _convert_rows(data: Mapping[str, Any]) -> list[Row]:
    style = "ts2date.converted" if data["converted"] else "ts2date.unchanged"
    return [("input", str(data["input"]), None), ("output", str(data["output"]), style)]


def _validate_rows(data: Mapping[str, Any]) -> list[Row]:
    return [("attributes", ", ".join(data.get("attributes") or ()) or "(none)", None)]


def _process_rows(data: Mapping[str, Any]) -> list[Row]:
    # Records themselves are written to the output stream, never rendered.
    return [(key, str(data.get(key, 0)), None) for key in _PROCESS_COUNTS]


def _data_rows(data: Mapping[str, Any]) -> list[Row]:
    return [(key, str(value), None) for key, value in data.items()]


_ROWS_BY_OP: dict[str, Callable[[Mapping[str, Any]], list[Row]]] = {
    "convert_value": _convert_rows,
    "validate_config": _validate_rows,
    "process_records": _process_rows,
}


def _print_section(console: Console, title: str, values: Mapping[str, Any]) -> None:
    console.print(Text(f"  {title}:", style="dim"))
    for key, value in values.items():
        console.print(Text(f"    {key}: {value}"))


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal."""

    def draw(console: Console) -> None:
        op = (f"  {result.op}", "ts2date.op")
        if not result.ok:
            error = result.error
            message = error.message if error else "Unknown error"
            console.print(Text.assemble(("ERROR", "ts2date.error"), op, " - ", message))
            if verbose and error and error.detail:
                _print_section(console, "detail", error.detail)
            return

        console.print(Text.assemble(("OK", "ts2date.ok"), op))
        for key, value, style in _ROWS_BY_OP.get(result.op, _data_rows)(result.data):
            console.print(Text.assemble((f"  {key}: ", "ts2date.key"), (value, style)))
        if verbose and result.meta:
            _print_section(console, "meta", result.meta)

    return capture_text(draw)


def render_quiet(result: ServiceResult) -> str:
    """One line for ``--quiet``: the converted value, or a status."""
    if result.ok:
        if result.op == "convert_value":
            return str(result.data.get("output", ""))
        return f"OK: {result.op}"
    message = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {message}"
