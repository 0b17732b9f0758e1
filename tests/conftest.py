"""Shared pytest fixtures and test helpers for ts2date tests."""

from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from ts2date.config.models import ProcessorConfig
from ts2date.domain.record import FlowRecord


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler changes made by configure_logging() during CLI tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("ts2date")
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TS2DATE_* environment out of the tests."""
    monkeypatch.delenv("TS2DATE_CONFIG", raising=False)
    monkeypatch.delenv("TS2DATE_PROCESSOR__ATTRIBUTES_LIST", raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp directory so no ts2date.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _set_tz(tz: str) -> Generator[None]:
    previous = os.environ.get("TZ")
    os.environ["TZ"] = tz
    time.tzset()
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = previous
        time.tzset()


@pytest.fixture
def utc_local_time() -> Generator[None]:
    """Pin the process-local time zone to UTC."""
    yield from _set_tz("UTC")


@pytest.fixture
def eastern_local_time() -> Generator[None]:
    """Pin the process-local time zone to a fixed UTC-5 offset."""
    yield from _set_tz("EST5")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_record(content: bytes = b"Test contents", **attributes: str) -> FlowRecord:
    """Build a FlowRecord; keyword names may use ``__`` for dots (``a__test1``)."""
    attrs = {name.replace("__", "."): value for name, value in attributes.items()}
    return FlowRecord(content=content, attributes=attrs)


def processor_config(attributes_list: str, **kwargs: Any) -> ProcessorConfig:
    return ProcessorConfig(attributes_list=attributes_list, **kwargs)


def jsonl(*records: dict[str, Any]) -> str:
    """Encode dicts as JSON-lines input."""
    return "".join(json.dumps(r) + "\n" for r in records)
