"""Logging setup for the ``tao`` logger hierarchy."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach one stream handler to the ``tao`` logger and set its level.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("tao")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if not any(getattr(h, "_tao_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tao_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
