"""Action wrapper: one instance per inbound SDK action invocation."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Self, Sequence

from tao.base import BaseWrapper
from tao.core.protocols import ISDKAction
from tao.core.types import Row
from tao.persistence.sql import function_call, named_args, param_args
from tao.plugins import action_plugins

logger = logging.getLogger(__name__)

ERROR_STATUS = "500 Internal Server Error"

# True: all parameters, str: parameters from that location,
# mapping: explicit name -> value pairs, falsy: no parameters.
Params = bool | str | Mapping[str, Any] | None


def error_code(exc: BaseException) -> int:
    code = getattr(exc, "code", 0)
    if isinstance(code, int) and not isinstance(code, bool):
        return code
    return 0


class Action(BaseWrapper):
    """Fluent helper around an SDK action.

    Loader, relation and link methods never raise: failures are logged and
    reported on the action's error slot. Plugin failures propagate.
    """

    ERROR_STATUS = ERROR_STATUS
    plugin_registry = action_plugins

    def __init__(self, action: ISDKAction, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._action = action

    @classmethod
    def init(cls, action: ISDKAction, **kwargs: Any) -> Self:
        return cls(action, **kwargs)

    @property
    def action(self) -> ISDKAction:
        return self._action

    def run(self) -> ISDKAction:
        """Return the SDK action, as SDK callbacks must."""
        return self._action

    # ---- parameters ----

    def params(self, location: str | None = None) -> str:
        """All declared parameters (optionally from one location) as named SQL arguments."""
        params = self._action.get_params(location) if location else self._action.get_params()
        return param_args(params, self.database.quote)

    def _call_args(self, params: Params) -> str:
        if not params:
            return ""
        if isinstance(params, Mapping):
            return named_args(params, self.database.quote)
        if isinstance(params, str):
            return self.params(params)
        return self.params()

    def _fetch(self, function: str, params: Params) -> list[Row]:
        sql = function_call(function, self._call_args(params))
        logger.debug("Executing %s", sql)
        return self.query(sql)

    # ---- transport data ----

    def entity(self, entity: Mapping[str, Any] | str, params: Params = True) -> Self:
        """Set the entity, or fetch the first row of SQL function ``entity``."""
        try:
            if isinstance(entity, str):
                rows = self._fetch(entity, params)
                if not rows:
                    logger.debug("%s returned no rows", entity)
                entity = rows[0] if rows else {}
            self._action.set_entity(dict(entity))
        except Exception as exc:
            logger.warning("Entity failed: %s", exc, exc_info=True)
            self.error(str(exc), error_code(exc))
        return self

    def collection(self, collection: Sequence[Mapping[str, Any]] | str,
                   params: Params = True) -> Self:
        """Set the collection, or fetch every row of SQL function ``collection``."""
        try:
            if isinstance(collection, str):
                collection = self._fetch(collection, params)
            self._action.set_collection([dict(row) for row in collection])
        except Exception as exc:
            logger.warning("Collection failed: %s", exc, exc_info=True)
            self.error(str(exc), error_code(exc))
        return self

    def relation(self, pk: Any, resource: str, fk: Any) -> Self:
        """Relate the entity ``pk`` to one (scalar ``fk``) or many (list ``fk``) ``resource`` records."""
        try:
            if isinstance(fk, (list, tuple)):
                self._action.relate_many(pk, resource, list(fk))
            else:
                self._action.relate_one(pk, resource, fk)
        except Exception as exc:
            logger.warning("Relation failed: %s", exc, exc_info=True)
            self.error(str(exc), error_code(exc))
        return self

    def link(self, link: str, uri: str) -> Self:
        try:
            self._action.set_link(link, uri)
        except Exception as exc:
            logger.warning("Link failed: %s", exc, exc_info=True)
            self.error(str(exc), error_code(exc))
        return self

    # ---- errors and logging ----

    def error(self, message: str, code: int = 0, status: str = ERROR_STATUS) -> Self:
        """Register an error on the transport.

        If the SDK rejects the report, the rejection itself is reported with
        the generic 500 status.
        """
        try:
            self._action.error(message, code, status)
        except Exception as exc:
            logger.warning("Reporting error %r failed: %s", message, exc)
            self._action.error(str(exc), error_code(exc), ERROR_STATUS)
        return self

    def log(self, value: Any, level: int | None = None) -> Self:
        """Write to the SDK's log sink."""
        if level is None:
            self._action.log(value)
        else:
            self._action.log(value, level)
        return self
