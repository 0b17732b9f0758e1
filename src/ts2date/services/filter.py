"""FilterService: validate configuration, convert values, process records."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from ts2date.domain.conversion import Converted, convert_value
from ts2date.infrastructure.records import record_to_dict
from ts2date.services.processor import Timestamp2DateFilter
from ts2date.services.result import ServiceResult

if TYPE_CHECKING:
    import pluggy

    from ts2date.config.settings import Ts2DateSettings
    from ts2date.domain.record import FlowRecord

logger = logging.getLogger(__name__)

RecordSink = Callable[["FlowRecord"], None]


class FilterService:
    """Service wrapper around :class:`Timestamp2DateFilter`.

    An optional pluggy manager (see :func:`ts2date.plugins.create_plugin_manager`)
    receives ``post_convert`` and ``post_transfer`` events.
    """

    def __init__(
        self,
        settings: Ts2DateSettings,
        plugin_manager: pluggy.PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._plugins = plugin_manager

    def validate(self) -> ServiceResult:
        """Check the ``[processor]`` configuration before any record is processed."""
        op = "validate_config"
        config = self._settings.processor
        problems = config.check_attributes_list()
        if problems:
            return _invalid_config(op, problems)

        warnings: list[str] = []
        names = config.attribute_names
        if not names:
            warnings.append("Attribute list contains only separators; no attribute is examined")
        return ServiceResult(
            ok=True,
            op=op,
            data={"attributes": sorted(names or ())},
            warnings=warnings,
        )

    def convert(self, value: str) -> ServiceResult:
        """Convert a single value. Needs no configuration."""
        outcome = convert_value(value)
        if isinstance(outcome, Converted):
            data = {"input": value, "output": outcome.value, "converted": True}
        else:
            data = {"input": value, "output": value, "converted": False}
        return ServiceResult(ok=True, op="convert_value", data=data)

    def process_records(
        self,
        records: Iterable[FlowRecord],
        *,
        sink: RecordSink | None = None,
    ) -> ServiceResult:
        """Run the filter over *records*.

        Each routed record is handed to *sink* as soon as it is processed,
        so input of any size streams through. Without a sink the routed
        records are collected into ``data["records"]``. Dropped records
        are only counted.
        """
        op = "process_records"
        config = self._settings.processor
        problems = config.check_attributes_list()
        if problems:
            return _invalid_config(op, problems)

        warnings: list[str] = []
        converted_count = 0

        def on_converted(attribute: str, original: str, converted: str) -> None:
            nonlocal converted_count
            converted_count += 1
            self._notify(
                "post_convert",
                warnings,
                attribute=attribute,
                original=original,
                converted=converted,
            )

        collected: list[dict[str, Any]] = []
        emit = sink if sink is not None else lambda record: collected.append(record_to_dict(record))

        flt = Timestamp2DateFilter(config, on_converted=on_converted)
        count = transferred = dropped = 0
        start = time.perf_counter()

        try:
            for record in records:
                count += 1
                relationship = flt.on_trigger(record)
                if relationship is None:
                    dropped += 1
                    continue
                emit(record)
                transferred += 1
                self._notify(
                    "post_transfer",
                    warnings,
                    relationship=str(relationship),
                    attributes=dict(record.attributes),
                )
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_RECORD", str(exc), processed=count)

        if flt.attribute_names is None:
            warnings.append("No attribute names configured; records were not examined")

        data: dict[str, Any] = {
            "count": count,
            "transferred": transferred,
            "dropped": dropped,
            "converted_attributes": converted_count,
        }
        if sink is None:
            data["records"] = collected
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=warnings,
            meta={"duration_ms": round((time.perf_counter() - start) * 1000, 3)},
        )

    def _notify(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Call a plugin hook. Hook failures become warnings, never errors."""
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Hook dispatch failed for {hook_name}")


def _invalid_config(op: str, problems: list[str]) -> ServiceResult:
    return ServiceResult.failure(
        op, "INVALID_CONFIG", "; ".join(problems), property="attributes_list"
    )
