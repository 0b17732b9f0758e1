"""The ``[processor]`` configuration section.

A working ``ts2date.toml`` needs one key::

    [processor]
    attributes_list = "created,updated"
"""

from __future__ import annotations

from pydantic import BaseModel

from ts2date.domain.attributes import is_valid_attribute_list, parse_attribute_list


class ProcessorConfig(BaseModel):
    """Immutable snapshot of the filter's configuration.

    Attributes:
        attributes_list: Comma-separated names of attributes to rewrite.
        drop_when_unconfigured: Drop records instead of passing them on
            when the list holds nothing but separators.
    """

    model_config = {"frozen": True}

    attributes_list: str = ""
    drop_when_unconfigured: bool = False

    def check_attributes_list(self) -> list[str]:
        """Return validation problems for ``attributes_list`` (empty when valid)."""
        if not is_valid_attribute_list(self.attributes_list):
            return ["'attributes_list' must be a non-empty, comma-separated list of names"]
        return []

    @property
    def attribute_names(self) -> frozenset[str] | None:
        """Parsed attribute names, or None when nothing usable is configured."""
        return parse_attribute_list(self.attributes_list)
