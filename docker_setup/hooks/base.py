"""Hook capability contract.

A hook owns two independent actions, one run when the container starts
(init) and one run when it stops (exit). Either action may be left
unconfigured, in which case running it does nothing.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from docker_setup.exceptions import CommandError, HookError
from docker_setup.runner import CommandResult, CommandRunner

logger = logging.getLogger(__name__)

Command = Union[str, tuple[str, ...]]
Runner = Callable[["HookAction"], CommandResult]


class HookStage(str, Enum):
    """Lifecycle moment a hook action belongs to."""

    INIT = "init"
    EXIT = "exit"


@dataclass(frozen=True)
class HookAction:
    """One side of a hook: a label and the command to run, if any.

    A string command is run through the shell; a tuple is run as an argv.
    env_var records where the command came from, for diagnostics.
    """

    label: str
    command: Command | None = None
    env_var: str | None = None

    @property
    def configured(self) -> bool:
        return bool(self.command)

    @property
    def command_line(self) -> str:
        if isinstance(self.command, tuple):
            return " ".join(self.command)
        return self.command or ""

    def describe(self) -> str:
        if self.env_var:
            return f"{self.label}: {self.env_var}={self.command_line}"
        return f"{self.label}: {self.command_line}"


class Hook(ABC):
    """Something that can run an init action and an exit action."""

    name: str

    @abstractmethod
    def run_init(self) -> None:
        """Run the init action. Raises HookError on failure."""

    @abstractmethod
    def run_exit(self) -> None:
        """Run the exit action. Raises HookError on failure."""

    @abstractmethod
    def describe(self) -> list[str]:
        """Human-readable lines, one per configured action."""


class CommandHook(Hook):
    """Hook whose actions are external commands handed to a runner."""

    def __init__(
        self,
        name: str,
        init: HookAction,
        exit: HookAction,
        runner: Runner | None = None,
    ) -> None:
        self.name = name
        self.init_action = init
        self.exit_action = exit
        self._runner = runner or CommandRunner()

    def run_init(self) -> None:
        self._run(HookStage.INIT, self.init_action)

    def run_exit(self) -> None:
        self._run(HookStage.EXIT, self.exit_action)

    def describe(self) -> list[str]:
        return [
            action.describe()
            for action in (self.init_action, self.exit_action)
            if action.configured
        ]

    def _run(self, stage: HookStage, action: HookAction) -> None:
        if not action.configured:
            logger.debug("No %s configured, skipping", action.label)
            return
        logger.info("Running %s", action.label)
        try:
            self._runner(action)
        except CommandError as e:
            raise HookError(self.name, stage.value, e) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
