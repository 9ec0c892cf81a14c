"""Shared fixtures for docker-setup tests."""

import pytest

import docker_setup.config
from docker_setup.exceptions import CommandError
from docker_setup.runner import CommandResult

HOOK_ENV_VARS = (
    "ONESHOT",
    "ROUTES_INIT",
    "ROUTES_EXIT",
    "PRE_INIT_HOOK",
    "PRE_EXIT_HOOK",
    "POST_INIT_HOOK",
    "POST_EXIT_HOOK",
    "HOOK_SHELL",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOGS_DIR",
)


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Start every test from an environment with no hook configuration."""
    for name in HOOK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    docker_setup.config._settings = None
    yield
    docker_setup.config._settings = None


class RecordingRunner:
    """Runner double that records action labels instead of spawning processes."""

    def __init__(self, failing=()):
        self.calls = []
        self.failing = set(failing)

    def __call__(self, action):
        self.calls.append(action.label)
        if action.label in self.failing:
            raise CommandError(action.command_line, 1, "boom")
        return CommandResult(returncode=0, output="")


@pytest.fixture
def recorder():
    return RecordingRunner()


@pytest.fixture
def failing_runner():
    """Factory for a recording runner whose listed action labels fail."""
    return RecordingRunner


@pytest.fixture
def all_hooks_env(monkeypatch):
    """Configure every user and route hook with a harmless command."""
    env = {
        "ROUTES_INIT": "ip route add 10.0.0.0/24 via 10.0.1.1",
        "ROUTES_EXIT": "ip route del 10.0.0.0/24",
        "PRE_INIT_HOOK": "/usr/local/bin/pre-init.sh",
        "PRE_EXIT_HOOK": "/usr/local/bin/pre-exit.sh",
        "POST_INIT_HOOK": "/usr/local/bin/post-init.sh",
        "POST_EXIT_HOOK": "/usr/local/bin/post-exit.sh",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env
