"""Attribute-list parsing and validation."""

from __future__ import annotations

ATTRIBUTE_LIST_SEPARATOR = ","


def is_valid_attribute_list(raw: str | None) -> bool:
    """Return True unless *raw* is None, empty, or whitespace-only."""
    return raw is not None and bool(raw.strip())


def parse_attribute_list(raw: str | None) -> frozenset[str] | None:
    """Split a comma-separated attribute list into a set of names.

    Segments are trimmed and empty segments are dropped. Returns None
    when nothing is configured.

    Examples:
        >>> sorted(parse_attribute_list(" a.date , b.date,a.date"))
        ['a.date', 'b.date']
        >>> parse_attribute_list("  ") is None
        True
        >>> parse_attribute_list(", ,") is None
        True
    """
    if raw is None or not raw.strip():
        return None
    names = frozenset(
        name for name in (part.strip() for part in raw.split(ATTRIBUTE_LIST_SEPARATOR)) if name
    )
    return names or None
