"""Routing relationships for processed records."""

from __future__ import annotations

from enum import StrEnum


class Relationship(StrEnum):
    """Outcomes a processed record can be transferred to."""

    SUCCESS = "success"
