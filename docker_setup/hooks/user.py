"""User-supplied hooks driven entirely by environment variables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docker_setup.hooks.base import CommandHook, HookAction, Runner

if TYPE_CHECKING:
    from docker_setup.config import Settings


class UserHook(CommandHook):
    """Runs whatever command the init/exit environment variables hold.

    An unset variable leaves that side unconfigured.
    """

    def __init__(
        self,
        name: str,
        init_label: str,
        init_env: str,
        exit_label: str,
        exit_env: str,
        settings: Settings,
        runner: Runner | None = None,
    ) -> None:
        super().__init__(
            name,
            init=HookAction(init_label, settings.command_for(init_env), init_env),
            exit=HookAction(exit_label, settings.command_for(exit_env), exit_env),
            runner=runner,
        )

    @classmethod
    def from_prefix(
        cls,
        name: str,
        prefix: str,
        settings: Settings,
        runner: Runner | None = None,
    ) -> "UserHook":
        """Build the hook wired to <PREFIX>_INIT_HOOK and <PREFIX>_EXIT_HOOK."""
        return cls(
            name,
            f"{name} init", f"{prefix}_INIT_HOOK",
            f"{name} exit", f"{prefix}_EXIT_HOOK",
            settings=settings,
            runner=runner,
        )
