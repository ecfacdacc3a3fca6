"""Action handlers loaded from Python source files at request time.

A source file must define ``handle(action)``, which receives the SDK action
and returns it, like any other SDK callback.
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable

from tao.action import Action
from tao.core.exceptions import ActionSourceError
from tao.core.protocols import ISDKAction

logger = logging.getLogger(__name__)

HANDLER = "handle"
ACTION_SOURCE_ERROR = ActionSourceError.code

ActionHandler = Callable[[Any], Any]


def _module_name(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:16]
    return f"tao_action_{path.stem}_{digest}"


def load_handler(path: str | os.PathLike[str]) -> ActionHandler:
    """Import ``path`` and return its ``handle`` function."""
    path = Path(path).resolve()
    if not path.is_file() or not os.access(path, os.R_OK):
        raise ActionSourceError(str(path), "not readable")

    module_name = _module_name(path)
    spec = importlib.util.spec_from_file_location(module_name, str(path))
    if spec is None or spec.loader is None:
        raise ActionSourceError(str(path), "cannot create module spec")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except SyntaxError as exc:
        sys.modules.pop(module_name, None)
        raise ActionSourceError(str(path), f"syntax error: {exc}") from exc
    except Exception:
        sys.modules.pop(module_name, None)
        raise

    handler = getattr(module, HANDLER, None)
    if not callable(handler):
        raise ActionSourceError(str(path), f"missing {HANDLER}() function")
    return handler


def file_action(path: str | os.PathLike[str]) -> ActionHandler:
    """SDK callback that runs the handler in ``path``, re-read on every request."""
    source = Path(path)

    def callback(action: ISDKAction) -> Any:
        try:
            handler = load_handler(source)
        except ActionSourceError as exc:
            logger.error("%s", exc)
            return Action.init(action).error(str(exc), ACTION_SOURCE_ERROR).run()
        return handler(action)

    callback.__name__ = f"file_action[{source.name}]"
    return callback
