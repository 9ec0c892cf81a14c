"""Custom exception hierarchy for docker-setup."""


class DockerSetupError(Exception):
    """Base exception for docker-setup."""
    pass


class CommandError(DockerSetupError):
    """Raised when an external command exits non-zero or cannot be launched."""

    def __init__(self, command, returncode: int | None, output: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        if returncode is None:
            message = f"could not launch {command!r}: {output}"
        else:
            message = f"{command!r} exited with status {returncode}"
        super().__init__(message)


class HookError(DockerSetupError):
    """Raised when the init or exit action of a hook fails."""

    def __init__(self, hook: str, stage: str, cause: Exception) -> None:
        self.hook = hook
        self.stage = stage
        self.cause = cause
        super().__init__(f"{hook} {stage} hook failed: {cause}")
