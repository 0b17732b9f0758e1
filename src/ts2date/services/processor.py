"""Timestamp-to-date filter applied to one record at a time.

The filter holds an immutable configuration snapshot, so a single
instance can serve concurrent callers as long as each call works on
its own record.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from ts2date.domain.conversion import Converted, convert_value
from ts2date.domain.types import Relationship

if TYPE_CHECKING:
    from ts2date.config.models import ProcessorConfig
    from ts2date.domain.record import RecordLike

logger = logging.getLogger(__name__)

# Called as ``listener(attribute, original, converted)`` after each rewrite.
ConversionListener = Callable[[str, str, str], None]


def apply_conversions(
    record: RecordLike,
    attribute_names: Iterable[str],
    *,
    on_converted: ConversionListener | None = None,
) -> list[str]:
    """Rewrite every legacy date attribute of *record* named in *attribute_names*.

    Absent attributes are skipped. Returns the names that were rewritten.
    """
    converted: list[str] = []
    for name in attribute_names:
        value = record.get_attribute(name)
        if value is None:
            continue
        outcome = convert_value(value)
        if not isinstance(outcome, Converted):
            continue
        record.put_attribute(name, outcome.value)
        converted.append(name)
        logger.debug("Converted attribute %s: %r -> %r", name, value, outcome.value)
        if on_converted is not None:
            on_converted(name, value, outcome.value)
    return converted


class Timestamp2DateFilter:
    """Rewrites ``/Date(<millis>)/`` attributes and routes records to success.

    Raises:
        ValueError: If ``config.attributes_list`` is blank.
    """

    def __init__(
        self,
        config: ProcessorConfig,
        *,
        on_converted: ConversionListener | None = None,
    ) -> None:
        problems = config.check_attributes_list()
        if problems:
            raise ValueError("; ".join(problems))
        self._config = config
        self._attribute_names = config.attribute_names
        self._on_converted = on_converted

    @property
    def config(self) -> ProcessorConfig:
        return self._config

    @property
    def attribute_names(self) -> frozenset[str] | None:
        """Configured names, or None when the list holds only separators."""
        return self._attribute_names

    def process(self, record: RecordLike) -> RecordLike:
        """Convert configured attributes of *record* in place and return it."""
        if self._attribute_names:
            apply_conversions(
                record,
                sorted(self._attribute_names),
                on_converted=self._on_converted,
            )
        return record

    def on_trigger(self, record: RecordLike) -> Relationship | None:
        """Process *record* and return where it goes, or None to drop it."""
        if not self._attribute_names:
            if self._config.drop_when_unconfigured:
                logger.warning(
                    "No attribute names in %r; dropping record",
                    self._config.attributes_list,
                )
                return None
            logger.warning(
                "No attribute names in %r; passing record through unchanged",
                self._config.attributes_list,
            )
            return Relationship.SUCCESS

        self.process(record)
        return Relationship.SUCCESS
