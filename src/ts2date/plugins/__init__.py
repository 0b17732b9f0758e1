"""Record event hooks via pluggy.

Embedding code that wants to observe the filter registers objects with
``@hookimpl`` methods on a manager from :func:`create_plugin_manager`
and passes it to :class:`~ts2date.services.filter.FilterService`.
"""

from __future__ import annotations

import pluggy

from ts2date.plugins.hookspecs import PROJECT_NAME, Ts2DateHookSpec, hookimpl

__all__ = ["create_plugin_manager", "hookimpl"]


def create_plugin_manager(*plugins: object) -> pluggy.PluginManager:
    """Manager with the ts2date hookspecs and *plugins* registered.

    Raises:
        pluggy.PluginValidationError: If a plugin implements a hook that
            does not exist.
    """
    manager = pluggy.PluginManager(PROJECT_NAME)
    manager.add_hookspecs(Ts2DateHookSpec)
    for plugin in plugins:
        manager.register(plugin)
    manager.check_pending()
    return manager
