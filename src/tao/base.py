"""Base wrapper with settings, database and plugin wiring shared by Action and Service."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Self

from tao.core.config import AppSettings, load_settings
from tao.core.protocols import IDatabase
from tao.persistence import create_database
from tao.plugins.registry import PluginRegistry, plugin_name

logger = logging.getLogger(__name__)


class BaseWrapper:
    """Common base for the Action and Service wrappers.

    Settings, database and plugin registry may be injected at construction
    time; otherwise settings are loaded from disk and the database backend is
    built from them on first use. One database handle lives for the lifetime
    of the wrapper.
    """

    plugin_registry: ClassVar[PluginRegistry]

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        database: IDatabase | None = None,
        plugins: PluginRegistry | None = None,
    ) -> None:
        self._settings = settings
        self._database = database
        self._plugin_registry = plugins if plugins is not None else type(self).plugin_registry
        self._plugins: dict[str, Any] = {}

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @property
    def database(self) -> IDatabase:
        if self._database is None:
            self._database = create_database(self.settings)
        return self._database

    def query(self, sql: str) -> list[dict[str, Any]]:
        """Run raw SQL and return rows as column -> value mappings."""
        return self.database.query(sql)

    def get_plugin(self, name: str) -> Any:
        """Return the plugin registered as ``name``, creating it on first use."""
        key = plugin_name(name)
        plugin = self._plugins.get(key)
        if plugin is None:
            plugin = self._plugin_registry.create(name, self)
            self._plugins[key] = plugin
            logger.debug("Created %s plugin %r", self._plugin_registry.kind, name)
        return plugin

    def plugin(self, name: str, *args: Any, **kwargs: Any) -> Self:
        """Run plugin ``name`` with the given arguments."""
        self.get_plugin(name).run(*args, **kwargs)
        return self

    def close(self) -> None:
        """Release the database handle, if one was opened."""
        if self._database is not None:
            self._database.close()
            self._database = None
