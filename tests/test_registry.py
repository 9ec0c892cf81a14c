"""Tests for docker_setup/hooks/registry.py."""

from docker_setup.config import Settings
from docker_setup.hooks import HookRegistry, IPRouteHook, Nat4Hook, UserHook, build_registry


def test_lookup_missing_key_returns_none():
    registry = HookRegistry()
    assert registry.lookup("pre") is None
    assert "pre" not in registry
    assert len(registry) == 0


def test_register_overwrites_existing_key():
    registry = HookRegistry()
    first = Nat4Hook()
    second = Nat4Hook()
    registry.register("nat4", first)
    registry.register("nat4", second)
    assert registry.lookup("nat4") is second
    assert len(registry) == 1


def test_iteration_yields_pairs_in_registration_order():
    registry = HookRegistry()
    registry.register("b", Nat4Hook())
    registry.register("a", Nat4Hook())
    assert [key for key, _ in registry] == ["b", "a"]


def test_build_registry_has_builtin_set(recorder):
    registry = build_registry(Settings(), runner=recorder)

    assert len(registry) == 4
    assert isinstance(registry.lookup("iproute"), IPRouteHook)
    assert isinstance(registry.lookup("nat4"), Nat4Hook)
    assert isinstance(registry.lookup("pre"), UserHook)
    assert isinstance(registry.lookup("post"), UserHook)


def test_build_registry_wires_user_hook_variables(monkeypatch, recorder):
    monkeypatch.setenv("PRE_INIT_HOOK", "/pre-init")
    monkeypatch.setenv("POST_EXIT_HOOK", "/post-exit")
    registry = build_registry(Settings(), runner=recorder)

    pre = registry.lookup("pre")
    post = registry.lookup("post")
    assert pre.init_action.env_var == "PRE_INIT_HOOK"
    assert pre.init_action.command == "/pre-init"
    assert pre.exit_action.env_var == "PRE_EXIT_HOOK"
    assert not pre.exit_action.configured
    assert post.exit_action.command == "/post-exit"
    assert post.init_action.env_var == "POST_INIT_HOOK"


def test_registry_snapshot_ignores_later_env_changes(monkeypatch, recorder):
    settings = Settings()
    registry = build_registry(settings, runner=recorder)
    monkeypatch.setenv("PRE_INIT_HOOK", "/too-late")

    registry.lookup("pre").run_init()

    assert recorder.calls == []
