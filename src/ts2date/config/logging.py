"""Log rendering for the ts2date CLI.

Library modules log through ``logging.getLogger(__name__)`` and never
configure anything. The CLI installs a single stderr handler whose
structlog formatter renders those records for a terminal, or as JSON
lines with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "ts2date"


def build_formatter(*, log_json: bool = False) -> structlog.stdlib.ProcessorFormatter:
    """structlog formatter for records coming from stdlib loggers."""
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send log records to stderr; ``ts2date.*`` logs at DEBUG when *verbose*.

    Replaces the root handlers, so repeated calls never stack output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(log_json=log_json))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
