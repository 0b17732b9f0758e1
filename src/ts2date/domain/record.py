"""Record model: an opaque payload plus string attributes.

The filter only touches attributes. Host pipelines may pass their own
record objects as long as they satisfy :class:`RecordLike`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Self


class RecordLike(Protocol):
    """Attribute accessors the filter needs from a host record."""

    def get_attribute(self, name: str) -> str | None: ...

    def put_attribute(self, name: str, value: str) -> Self: ...


@dataclass
class FlowRecord:
    """A record travelling through the pipeline.

    ``content`` is never inspected or modified by the filter.
    """

    content: bytes = b""
    attributes: dict[str, str] = field(default_factory=dict)

    def get_attribute(self, name: str) -> str | None:
        """Return the value of *name*, or None if absent."""
        return self.attributes.get(name)

    def put_attribute(self, name: str, value: str) -> FlowRecord:
        """Set *name* to *value* in place and return this record."""
        self.attributes[name] = value
        return self
