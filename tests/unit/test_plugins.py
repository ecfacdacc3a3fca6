"""Tests for plugin registration, resolution and caching."""

from __future__ import annotations

import pytest

from tao.action import Action
from tao.core.exceptions import InvalidPluginError, PluginNotFoundError
from tao.plugins import ActionPlugin, PluginRegistry, ServicePlugin, action_plugins
from tao.plugins.registry import plugin_name
from tao.service import Service


class Audit(ActionPlugin):
    def __init__(self, action):
        super().__init__(action)
        self.calls = []

    def run(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        self.action.log(f"audit {args}")


class Tag(ActionPlugin):
    def run(self, name, value):
        self.action.link(name, value)


class NoRun(ActionPlugin):
    pass


class TwoArgs(ActionPlugin):
    def __init__(self, action, extra):
        super().__init__(action)

    def run(self):
        pass


class Faulty(ActionPlugin):
    def __init__(self, action):
        super().__init__(action)
        len(None)

    def run(self):
        pass


class NotAPlugin:
    def __init__(self, action):
        self.action = action

    def run(self):
        pass


class Banner(ServicePlugin):
    def run(self, text):
        self.service.startup(lambda component: text)


@pytest.fixture
def registry():
    reg = PluginRegistry("action", ActionPlugin)
    reg.register(Audit)
    reg.register("tag", Tag)
    reg.register("noRun", NoRun)
    reg.register("twoArgs", TwoArgs)
    reg.register("notAPlugin", NotAPlugin)
    reg.register(Faulty)
    return reg


@pytest.fixture
def action(sdk_action, database, registry):
    return Action.init(sdk_action, database=database, plugins=registry)


class TestRegistry:
    def test_default_name_lowercases_first_letter(self):
        assert plugin_name("AuditTrail") == "auditTrail"

    def test_register_derives_name_from_class(self, registry):
        assert "audit" in registry
        assert registry.names() == ["audit", "faulty", "noRun", "notAPlugin", "tag", "twoArgs"]

    def test_register_as_decorator_with_name(self):
        reg = PluginRegistry("action", ActionPlugin)

        @reg.register("stamp")
        class Stamp(ActionPlugin):
            def run(self):
                pass

        assert "stamp" in reg

    def test_duplicate_name_is_rejected(self, registry):
        with pytest.raises(ValueError):
            registry.register("audit", Tag)

    def test_unregister(self, registry):
        registry.unregister("audit")
        assert "audit" not in registry


class TestResolution:
    def test_unknown_name_is_not_found(self, action):
        with pytest.raises(PluginNotFoundError, match="not found"):
            action.plugin("missing")

    def test_missing_run_is_invalid(self, action):
        with pytest.raises(InvalidPluginError, match="Invalid action plugin 'noRun'"):
            action.plugin("noRun")

    def test_wrong_constructor_is_invalid(self, action):
        with pytest.raises(InvalidPluginError):
            action.plugin("twoArgs")

    def test_wrong_base_is_invalid(self, action):
        with pytest.raises(InvalidPluginError, match="not a ActionPlugin"):
            action.plugin("notAPlugin")

    def test_lookup_ignores_case_of_first_letter(self, action, registry):
        assert "Audit" in registry
        assert action.get_plugin("Audit") is action.get_plugin("audit")

    def test_error_inside_constructor_propagates(self, action):
        with pytest.raises(TypeError, match="NoneType"):
            action.get_plugin("faulty")

    def test_same_name_returns_cached_instance(self, action):
        first = action.get_plugin("audit")
        assert action.get_plugin("audit") is first

    def test_instances_are_per_wrapper(self, sdk_action, database, registry):
        one = Action.init(sdk_action, database=database, plugins=registry)
        two = Action.init(sdk_action, database=database, plugins=registry)
        assert one.get_plugin("audit") is not two.get_plugin("audit")

    def test_plugin_is_bound_to_owner(self, action):
        assert action.get_plugin("audit").action is action


class TestRun:
    def test_every_call_runs_with_arguments(self, action):
        action.plugin("audit", 1, key="a").plugin("audit", 2)
        assert action.get_plugin("audit").calls == [((1,), {"key": "a"}), ((2,), {})]

    def test_returns_wrapper_for_chaining(self, action, sdk_action):
        result = action.plugin("tag", "self", "/users/1")
        assert result is action
        assert sdk_action.links == {"self": "/users/1"}

    def test_default_action_registry(self, sdk_action, database):
        action_plugins.register(Audit)
        try:
            action = Action.init(sdk_action, database=database)
            action.plugin("audit", "x")
            assert sdk_action.logs == [("audit ('x',)", None)]
        finally:
            action_plugins.unregister("audit")


class TestServicePlugins:
    def test_service_plugin_runs_against_service(self, sdk_service):
        reg = PluginRegistry("service", ServicePlugin)
        reg.register(Banner)
        service = Service(service=sdk_service, plugins=reg)
        assert service.plugin("banner", "hello") is service
        assert len(sdk_service.startup_callbacks) == 1

    def test_action_plugin_is_invalid_for_service_registry(self, sdk_service):
        reg = PluginRegistry("service", ServicePlugin)
        reg.register(Tag)
        service = Service(service=sdk_service, plugins=reg)
        with pytest.raises(InvalidPluginError):
            service.plugin("tag")
