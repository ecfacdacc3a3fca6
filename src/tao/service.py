"""Service wrapper: one instance per process."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Callable, Mapping, Self

from tao.action import Action
from tao.base import BaseWrapper
from tao.core.log import configure_logging
from tao.core.protocols import ISDKAction, ISDKService
from tao.loader import ActionHandler, file_action
from tao.plugins import service_plugins

logger = logging.getLogger(__name__)

STATUS_ACTION = "status"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# A callback, or the path of a source file defining ``handle(action)``.
HandlerSpec = ActionHandler | str | os.PathLike


def _sdk_service() -> ISDKService:
    from kusanagi.sdk import Service as SDKService

    return SDKService()


def status(action: ISDKAction) -> ISDKAction:
    """Built-in health check."""
    return Action.init(action).entity({
        "status": "OK",
        "service": action.get_name(),
        "version": action.get_version(),
        "time": datetime.now().strftime(TIME_FORMAT),
    }).run()


class Service(BaseWrapper):
    """Registers actions on the SDK service and hands control to its loop."""

    plugin_registry = service_plugins

    def __init__(self, service: ISDKService | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._service = service if service is not None else _sdk_service()

    @property
    def service(self) -> ISDKService:
        return self._service

    @classmethod
    def init(cls, actions: Mapping[str, HandlerSpec] | None = None, **kwargs: Any) -> Self:
        """Create a service with ``status`` plus every ``{name: handler}`` in ``actions``."""
        instance = cls(**kwargs)
        instance.action(STATUS_ACTION, status)
        for name, handler in (actions or {}).items():
            instance.action(name, handler)
        return instance

    def action(self, name: str, handler: HandlerSpec) -> Self:
        if isinstance(handler, (str, os.PathLike)):
            handler = file_action(handler)
        self._service.action(name, handler)
        logger.debug("Registered action %r", name)
        return self

    def startup(self, callback: Callable[[Any], Any]) -> Self:
        self._service.startup(callback)
        return self

    def shutdown(self, callback: Callable[[Any], Any]) -> Self:
        self._service.shutdown(callback)
        return self

    def run(self) -> bool:
        configure_logging(self.settings.log_level)
        logger.info("Starting service")
        return self._service.run()
