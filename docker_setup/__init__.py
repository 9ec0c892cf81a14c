"""docker-setup - init/exit hooks for container network setup"""

__version__ = "0.1.0"

from .conf import Conf, LifecycleState
from .exceptions import CommandError, DockerSetupError, HookError

__all__ = ["Conf", "LifecycleState", "CommandError", "DockerSetupError", "HookError"]
