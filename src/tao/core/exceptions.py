"""Tao exception hierarchy."""

from __future__ import annotations


class TaoError(Exception):
    """Base exception for all Tao errors."""

    code: int = 0


class SettingsError(TaoError):
    """Settings file could not be read or parsed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Settings file {path!r}: {message}")


class DatabaseError(TaoError):
    """Database connection or query failed."""


class PluginError(TaoError):
    """Base for plugin resolution failures."""

    def __init__(self, kind: str, name: str, message: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(message)


class PluginNotFoundError(PluginError):
    """No plugin registered under the requested name."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(kind, name, f"{kind.capitalize()} plugin not found: {name!r}")


class InvalidPluginError(PluginError):
    """Registered plugin does not satisfy the plugin contract."""

    def __init__(self, kind: str, name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(kind, name, f"Invalid {kind} plugin {name!r}: {reason}")


class ActionSourceError(TaoError):
    """Action source file could not be loaded."""

    code = 1

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Action source {path!r}: {message}")
