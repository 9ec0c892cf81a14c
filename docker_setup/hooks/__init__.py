"""Hook types and the registry that holds them."""

from docker_setup.hooks.base import CommandHook, Hook, HookAction, HookStage
from docker_setup.hooks.iproute import IPRouteHook
from docker_setup.hooks.nat import Nat4Hook
from docker_setup.hooks.registry import HookRegistry, build_registry
from docker_setup.hooks.user import UserHook

__all__ = [
    "CommandHook",
    "Hook",
    "HookAction",
    "HookStage",
    "HookRegistry",
    "IPRouteHook",
    "Nat4Hook",
    "UserHook",
    "build_registry",
]
