"""JSON-lines record codec.

One record per line::

    {"attributes": {"created": "/Date(1644364800000)/"}, "content": "..."}

``content`` is optional and carried verbatim as UTF-8 text. Blank lines
are skipped.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any, TextIO

from ts2date.domain.record import FlowRecord


def parse_record_line(line: str, lineno: int = 1) -> FlowRecord:
    """Decode a single JSON-lines record.

    Raises:
        ValueError: If the line is not a JSON object with string attributes.
    """
    try:
        raw = json.loads(line)
    except json.JSONDecodeError as exc:
        msg = f"line {lineno}: invalid JSON ({exc.msg})"
        raise ValueError(msg) from exc

    if not isinstance(raw, dict):
        raise ValueError(f"line {lineno}: expected a JSON object")

    attributes = raw.get("attributes", {})
    if not isinstance(attributes, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in attributes.items()
    ):
        raise ValueError(f"line {lineno}: 'attributes' must map strings to strings")

    content = raw.get("content", "")
    if not isinstance(content, str):
        raise ValueError(f"line {lineno}: 'content' must be a string")

    return FlowRecord(content=content.encode("utf-8"), attributes=dict(attributes))


def read_records(stream: TextIO) -> Iterator[FlowRecord]:
    """Yield records from a JSON-lines *stream*."""
    for lineno, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        yield parse_record_line(line, lineno)


def record_to_dict(record: FlowRecord) -> dict[str, Any]:
    """JSON-ready view of *record*."""
    return {
        "attributes": dict(record.attributes),
        "content": record.content.decode("utf-8"),
    }


def write_record(record: FlowRecord | dict[str, Any], stream: TextIO) -> None:
    """Write one record, or a dict from :func:`record_to_dict`, as a JSON line."""
    data = record_to_dict(record) if isinstance(record, FlowRecord) else record
    stream.write(json.dumps(data, ensure_ascii=False) + "\n")

