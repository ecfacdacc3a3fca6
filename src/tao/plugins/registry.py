"""Explicit name -> factory registry for wrapper plugins."""

from __future__ import annotations

import inspect
from typing import Any, Callable

from tao.core.exceptions import InvalidPluginError, PluginNotFoundError
from tao.core.protocols import IPlugin

PluginFactory = Callable[[Any], Any]


def plugin_name(class_name: str) -> str:
    """``AuditTrail`` -> ``auditTrail``: the name a class registers under by default."""
    return class_name[:1].lower() + class_name[1:]


class PluginRegistry:
    """Plugins of one kind (``action`` or ``service``).

    A factory is called with the owning wrapper and must return an instance of
    ``base`` exposing a callable ``run``. Usable as a decorator::

        @action_plugins.register
        class Audit(ActionPlugin): ...

        @action_plugins.register("audit-v2")
        class AuditV2(ActionPlugin): ...
    """

    def __init__(self, kind: str, base: type) -> None:
        self.kind = kind
        self.base = base
        self._factories: dict[str, PluginFactory] = {}

    def register(self, name: str | PluginFactory | None = None,
                 factory: PluginFactory | None = None) -> Any:
        if callable(name):
            return self._add(None, name)
        if factory is not None:
            return self._add(name, factory)

        def decorator(obj: PluginFactory) -> PluginFactory:
            return self._add(name, obj)

        return decorator

    def _add(self, name: str | None, factory: PluginFactory) -> PluginFactory:
        key = plugin_name(name or getattr(factory, "__name__", ""))
        if not key:
            raise ValueError(f"{self.kind} plugin factory {factory!r} needs an explicit name")
        current = self._factories.get(key)
        if current is not None and current is not factory:
            raise ValueError(f"{self.kind} plugin {key!r} is already registered")
        self._factories[key] = factory
        return factory

    def unregister(self, name: str) -> None:
        self._factories.pop(plugin_name(name), None)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and plugin_name(name) in self._factories

    def create(self, name: str, owner: Any) -> Any:
        """Instantiate plugin ``name`` bound to ``owner`` and check its contract."""
        try:
            factory = self._factories[plugin_name(name)]
        except KeyError:
            raise PluginNotFoundError(self.kind, name) from None

        if inspect.isabstract(factory):
            raise InvalidPluginError(self.kind, name, "missing run()")
        try:
            signature = inspect.signature(factory)
        except (TypeError, ValueError):
            signature = None
        if signature is not None:
            try:
                signature.bind(owner)
            except TypeError as exc:
                raise InvalidPluginError(
                    self.kind, name, f"cannot be constructed from {type(owner).__name__}: {exc}",
                ) from exc

        plugin = factory(owner)
        if not isinstance(plugin, self.base):
            raise InvalidPluginError(self.kind, name, f"not a {self.base.__name__}")
        if not isinstance(plugin, IPlugin) or not callable(plugin.run):
            raise InvalidPluginError(self.kind, name, "missing run()")
        return plugin
