"""IP routing hook: install routes on init, remove them on exit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docker_setup.hooks.base import CommandHook, HookAction, Runner

if TYPE_CHECKING:
    from docker_setup.config import Settings

ROUTES_INIT = "ROUTES_INIT"
ROUTES_EXIT = "ROUTES_EXIT"


class IPRouteHook(CommandHook):
    """Runs the command or script named in ROUTES_INIT / ROUTES_EXIT."""

    def __init__(
        self,
        init_command: str | None,
        exit_command: str | None,
        runner: Runner | None = None,
        name: str = "iproute",
    ) -> None:
        super().__init__(
            name,
            init=HookAction(f"{name} init", init_command, ROUTES_INIT),
            exit=HookAction(f"{name} exit", exit_command, ROUTES_EXIT),
            runner=runner,
        )

    @classmethod
    def from_settings(cls, settings: Settings, runner: Runner | None = None) -> "IPRouteHook":
        return cls(
            settings.command_for(ROUTES_INIT),
            settings.command_for(ROUTES_EXIT),
            runner=runner,
        )
