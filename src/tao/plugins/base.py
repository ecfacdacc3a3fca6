"""Base classes every action or service plugin derives from."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tao.action import Action
    from tao.service import Service


class ActionPlugin(ABC):
    """Plugin bound to one :class:`~tao.action.Action`."""

    def __init__(self, action: Action) -> None:
        self._action = action

    @property
    def action(self) -> Action:
        return self._action

    @abstractmethod
    def run(self, *args: Any, **kwargs: Any) -> Any: ...


class ServicePlugin(ABC):
    """Plugin bound to one :class:`~tao.service.Service`."""

    def __init__(self, service: Service) -> None:
        self._service = service

    @property
    def service(self) -> Service:
        return self._service

    @abstractmethod
    def run(self, *args: Any, **kwargs: Any) -> Any: ...
