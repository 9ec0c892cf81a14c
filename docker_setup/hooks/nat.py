"""IPv4 NAT hook: masquerade outgoing traffic while the container runs."""

from __future__ import annotations

from docker_setup.hooks.base import CommandHook, HookAction, Runner

NAT4_INIT_COMMAND = ("iptables", "-t", "nat", "-A", "POSTROUTING", "-j", "MASQUERADE")
NAT4_EXIT_COMMAND = ("iptables", "-t", "nat", "-D", "POSTROUTING", "-j", "MASQUERADE")


class Nat4Hook(CommandHook):
    """Built-in rule, not configurable from the environment."""

    def __init__(self, runner: Runner | None = None, name: str = "nat4") -> None:
        super().__init__(
            name,
            init=HookAction(f"{name} init", NAT4_INIT_COMMAND),
            exit=HookAction(f"{name} exit", NAT4_EXIT_COMMAND),
            runner=runner,
        )
