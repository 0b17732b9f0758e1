"""Hooks fired while records are filtered."""

from __future__ import annotations

import pluggy

PROJECT_NAME = "ts2date"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class Ts2DateHookSpec:
    @hookspec
    def post_convert(self, attribute: str, original: str, converted: str) -> None:
        """Called after an attribute value is rewritten."""

    @hookspec
    def post_transfer(self, relationship: str, attributes: dict[str, str]) -> None:
        """Called after a record is routed to *relationship*."""
