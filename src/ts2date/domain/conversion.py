"""Legacy ``/Date(<millis>)/`` value conversion.

Values such as ``/Date(1644364800000)/`` carry a count of milliseconds
since the Unix epoch. :func:`convert_value` turns them into the local
calendar date (``YYYY-MM-DD``).

Dates follow the hybrid calendar used by the systems that emit these
values: Gregorian from 1582-10-15 on, Julian before that.

INVARIANT: Conversion never raises. Anything that cannot be converted
resolves to :data:`UNCHANGED` and the caller keeps the original value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

LEGACY_DATE_TOKEN = "/Date("

# Optional sign and decimal digits of any script; no whitespace or separators.
_MILLIS_PATTERN = re.compile(r"[+-]?\d+")
_MILLIS_MIN = -(2**63)
_MILLIS_MAX = 2**63 - 1

GREGORIAN_CUTOVER = date(1582, 10, 15)
# Julian day number minus the proleptic Gregorian ordinal.
_JDN_OFFSET = 1721425


@dataclass(frozen=True)
class Converted:
    """The value was rewritten to *value*."""

    value: str


@dataclass(frozen=True)
class Unchanged:
    """The value is left as it was."""


UNCHANGED = Unchanged()

ConversionOutcome = Converted | Unchanged


def extract_timestamp(value: str) -> str | None:
    """Return the text between the first ``(`` and the first ``)``.

    The scan covers the whole value, not only the ``/Date(`` token, so
    ``/Date(1644(3648))/`` yields ``"1644(3648"``.
    """
    start = value.find("(")
    end = value.find(")")
    if start < 0 or end <= start:
        return None
    return value[start + 1 : end]


def parse_millis(text: str) -> int | None:
    """Parse *text* as a signed 64-bit integer, or return None.

    Examples:
        >>> parse_millis("-42")
        -42
        >>> parse_millis("\\u0661\\u0662\\u0663")
        123
        >>> parse_millis("1_000") is None
        True
    """
    if _MILLIS_PATTERN.fullmatch(text) is None:
        return None
    millis = int(text)
    if not _MILLIS_MIN <= millis <= _MILLIS_MAX:
        return None
    return millis


def julian_date_fields(ordinal: int) -> tuple[int, int, int]:
    """Julian calendar ``(year, month, day)`` of a proleptic Gregorian *ordinal*."""
    c = ordinal + _JDN_OFFSET + 32082
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    return d - 4800 + m // 10, m + 3 - 12 * (m // 10), e - (153 * m + 2) // 5 + 1


def millis_to_local_date(millis: int) -> str | None:
    """Format epoch *millis* as a local ``YYYY-MM-DD`` date.

    Returns None when the instant falls outside years 1-9999.
    """
    seconds = millis // 1000
    try:
        local_day = datetime.fromtimestamp(seconds).date()
    except (OverflowError, OSError, ValueError):
        return None
    if local_day >= GREGORIAN_CUTOVER:
        return local_day.isoformat()
    # Julian leap days such as 1500-02-29 are not valid ``date`` values.
    year, month, day = julian_date_fields(local_day.toordinal())
    return f"{year:04d}-{month:02d}-{day:02d}"


def convert_value(value: str | None) -> ConversionOutcome:
    """Convert a legacy date attribute value.

    Examples:
        >>> convert_value("plain text")
        Unchanged()
        >>> convert_value("/Date(abc)/")
        Unchanged()
    """
    if not value or LEGACY_DATE_TOKEN not in value:
        return UNCHANGED

    candidate = extract_timestamp(value)
    if candidate is None:
        return UNCHANGED

    millis = parse_millis(candidate)
    if millis is None:
        return UNCHANGED

    date_text = millis_to_local_date(millis)
    if date_text is None:
        return UNCHANGED
    return Converted(date_text)
