"""Lifecycle controller.

Owns the hook registry and runs the init and exit sequences in their fixed
orders. A failing hook is logged and the sequence moves on to the next one:
partial network setup is preferred to none, and the sequences never raise.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum

from docker_setup.config import Settings
from docker_setup.exceptions import HookError
from docker_setup.hooks.base import Hook, HookStage, Runner
from docker_setup.hooks.registry import build_registry
from docker_setup.runner import CommandRunner

logger = logging.getLogger(__name__)

INIT_SEQUENCE = ("pre", "iproute", "nat4", "post")
# NAT rules may reference routes, so they go first; pre/post keep their ends.
EXIT_SEQUENCE = ("pre", "nat4", "iproute", "post")


class LifecycleState(str, Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    TERMINATING = "terminating"


class Conf:
    """Configuration built from environment variables, and the hooks it drives."""

    def __init__(self, settings: Settings, runner: Runner | None = None) -> None:
        if runner is None:
            runner = CommandRunner(shell=settings.hook_shell)
        self._hooks = build_registry(settings, runner=runner)
        self._oneshot = settings.oneshot
        self._state = LifecycleState.INITIALIZING
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls, runner: Runner | None = None) -> "Conf":
        """Snapshot the current process environment into a new Conf."""
        return cls(Settings(), runner=runner)

    @property
    def oneshot(self) -> bool:
        """True if exit hooks should run right after init hooks."""
        return self._oneshot

    @property
    def state(self) -> LifecycleState:
        return self._state

    def run_init_hooks(self) -> None:
        with self._lock:
            for name in INIT_SEQUENCE:
                self._run_hook(name, HookStage.INIT)
            self._state = LifecycleState.RUNNING

    def run_exit_hooks(self) -> None:
        with self._lock:
            self._state = LifecycleState.TERMINATING
            for name in EXIT_SEQUENCE:
                self._run_hook(name, HookStage.EXIT)

    def run_init_hook(self, name: str) -> None:
        with self._lock:
            self._run_hook(name, HookStage.INIT)

    def run_exit_hook(self, name: str) -> None:
        with self._lock:
            self._run_hook(name, HookStage.EXIT)

    def _run_hook(self, name: str, stage: HookStage) -> None:
        hook = self._hooks.lookup(name)
        if hook is None:
            return
        try:
            if stage is HookStage.INIT:
                hook.run_init()
            else:
                hook.run_exit()
        except HookError as e:
            logger.error("Error while running %s %s hook: %s", name, stage.value, e.cause)
        except Exception:
            logger.exception("Unexpected failure in %s %s hook", name, stage.value)

    def log(self) -> None:
        """Log the oneshot mode and every configured hook action."""
        logger.info("Current configuration:")
        if self._oneshot:
            logger.info("\t- mode oneshot is enabled")
        else:
            logger.info("\t- mode oneshot is disabled")
        for _, hook in self._hooks:
            for line in _describe(hook):
                logger.info("\t- %s", line)


def _describe(hook: Hook) -> list[str]:
    try:
        return hook.describe()
    except Exception:
        logger.exception("Could not describe hook %s", getattr(hook, "name", hook))
        return []
