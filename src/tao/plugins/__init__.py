"""Plugin registries for action and service wrappers."""

from __future__ import annotations

from tao.plugins.base import ActionPlugin, ServicePlugin
from tao.plugins.registry import PluginRegistry

action_plugins = PluginRegistry("action", ActionPlugin)
service_plugins = PluginRegistry("service", ServicePlugin)

__all__ = [
    "ActionPlugin",
    "PluginRegistry",
    "ServicePlugin",
    "action_plugins",
    "service_plugins",
]
