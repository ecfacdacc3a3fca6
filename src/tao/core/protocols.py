"""Protocol interfaces for the SDK boundary and Tao's own abstractions.

The SDK objects are consumed structurally: anything exposing the KUSANAGI
Python SDK method names satisfies these Protocols, which keeps the wrappers
testable with plain fakes.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# SDK: request parameter
# ---------------------------------------------------------------------------

@runtime_checkable
class ISDKParam(Protocol):
    """A typed request parameter."""

    def get_name(self) -> str: ...

    def get_type(self) -> str: ...

    def get_value(self) -> Any: ...


# ---------------------------------------------------------------------------
# SDK: action (request + response)
# ---------------------------------------------------------------------------

@runtime_checkable
class ISDKAction(Protocol):
    """Inbound action invocation with its response slots."""

    def get_name(self) -> str: ...

    def get_version(self) -> str: ...

    def get_params(self, *location: str) -> list[ISDKParam]: ...

    def set_entity(self, entity: dict[str, Any]) -> Any: ...

    def set_collection(self, collection: list[dict[str, Any]]) -> Any: ...

    def relate_one(self, primary_key: Any, service: str, foreign_key: Any) -> Any: ...

    def relate_many(self, primary_key: Any, service: str, foreign_keys: list[Any]) -> Any: ...

    def set_link(self, link: str, uri: str) -> Any: ...

    def error(self, message: str, code: int = 0, status: str = ...) -> Any: ...

    def log(self, value: Any, level: int = ...) -> Any: ...


# ---------------------------------------------------------------------------
# SDK: service runtime
# ---------------------------------------------------------------------------

@runtime_checkable
class ISDKService(Protocol):
    """Service process that dispatches named actions."""

    def action(self, name: str, callback: Callable[[Any], Any]) -> Any: ...

    def startup(self, callback: Callable[[Any], Any]) -> Any: ...

    def shutdown(self, callback: Callable[[Any], Any]) -> Any: ...

    def run(self) -> bool: ...


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@runtime_checkable
class IDatabase(Protocol):
    """Relational database handle used by the wrappers."""

    def query(self, sql: str) -> list[dict[str, Any]]: ...

    def quote(self, value: str) -> str: ...

    def close(self) -> None: ...


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------

@runtime_checkable
class IPlugin(Protocol):
    """Extension object bound to an Action or a Service."""

    def run(self, *args: Any, **kwargs: Any) -> Any: ...
