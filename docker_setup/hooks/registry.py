"""Registry of named hooks.

Populated once when the lifecycle controller is built. Execution order is
decided by the controller, never by the order hooks were registered in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from docker_setup.hooks.base import Hook, Runner
from docker_setup.hooks.iproute import IPRouteHook
from docker_setup.hooks.nat import Nat4Hook
from docker_setup.hooks.user import UserHook

if TYPE_CHECKING:
    from docker_setup.config import Settings

logger = logging.getLogger(__name__)


class HookRegistry:
    """Maps a unique key to a hook."""

    def __init__(self) -> None:
        self._hooks: dict[str, Hook] = {}

    def register(self, key: str, hook: Hook) -> None:
        """Register hook under key, replacing any hook already there."""
        if key in self._hooks:
            logger.debug("Replacing hook %s", key)
        self._hooks[key] = hook

    def lookup(self, key: str) -> Hook | None:
        return self._hooks.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[tuple[str, Hook]]:
        return iter(list(self._hooks.items()))


def build_registry(settings: Settings, runner: Runner | None = None) -> HookRegistry:
    """Create the built-in hook set: iproute, nat4, and the pre/post user hooks."""
    registry = HookRegistry()
    registry.register("iproute", IPRouteHook.from_settings(settings, runner=runner))
    registry.register("nat4", Nat4Hook(runner=runner))
    registry.register("pre", UserHook.from_prefix("pre", "PRE", settings, runner=runner))
    registry.register("post", UserHook.from_prefix("post", "POST", settings, runner=runner))
    return registry
