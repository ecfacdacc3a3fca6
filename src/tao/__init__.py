"""Tao: helpers for KUSANAGI-style services backed by PostgreSQL functions."""

from __future__ import annotations

from tao.action import Action
from tao.core.config import AppSettings, load_settings
from tao.plugins import ActionPlugin, ServicePlugin, action_plugins, service_plugins
from tao.service import Service

__all__ = [
    "Action",
    "ActionPlugin",
    "AppSettings",
    "Service",
    "ServicePlugin",
    "action_plugins",
    "load_settings",
    "service_plugins",
]
