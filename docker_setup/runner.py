"""
External command runner.
Executes a hook action's command as a child process and waits for it.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docker_setup.exceptions import CommandError

if TYPE_CHECKING:
    from docker_setup.hooks.base import HookAction

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a successful command."""

    returncode: int
    output: str


class CommandRunner:
    """Runs hook commands synchronously.

    String commands go through the shell so that scripts, arguments and
    redirections work as written in the environment variable. Tuple or
    list commands are executed directly without a shell.
    """

    def __init__(self, shell: str = "/bin/sh") -> None:
        self.shell = shell

    def __call__(self, action: HookAction) -> CommandResult:
        command = action.command
        use_shell = isinstance(command, str)
        logger.debug("Launching %s: %s", action.label, action.command_line)

        try:
            result = subprocess.run(
                command if use_shell else list(command),
                shell=use_shell,
                executable=self.shell if use_shell else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise CommandError(action.command_line, None, str(e)) from e

        output = result.stdout or ""
        for line in output.splitlines():
            logger.info("[%s] %s", action.label, line)

        if result.returncode != 0:
            raise CommandError(action.command_line, result.returncode, output)
        return CommandResult(returncode=result.returncode, output=output)
