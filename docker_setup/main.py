"""
docker-setup entry point.
Runs the init hooks, waits for the container to be stopped, then runs the exit hooks.
"""

import logging
import signal
import threading

from .config import get_settings
from .conf import Conf
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

TERMINATION_SIGNALS = (signal.SIGTERM, signal.SIGINT)


class TerminationSignals:
    """Records SIGTERM/SIGINT while installed instead of letting them kill the process.

    Usage:
        with TerminationSignals() as signals:
            conf.run_init_hooks()
            signals.wait()
            conf.run_exit_hooks()
    """

    def __init__(self) -> None:
        self.received: list[int] = []
        self._previous: dict = {}

    def _handle_signal(self, signum, frame):
        # Runs between bytecodes of the main thread; must not take locks
        self.received.append(signum)

    def install(self) -> None:
        self._previous = {sig: signal.signal(sig, self._handle_signal) for sig in TERMINATION_SIGNALS}

    def restore(self) -> None:
        for sig, handler in self._previous.items():
            signal.signal(sig, handler)
        self._previous = {}

    def __enter__(self) -> "TerminationSignals":
        self.install()
        return self

    def __exit__(self, *exc_info) -> None:
        self.restore()

    def wait(self, stop: threading.Event | None = None, poll_interval: float = 0.5) -> int:
        """Block until a signal has been recorded, or stop is set.

        Returns at once if a signal arrived before the call. Returns the
        signal number, or 0 when woken through stop.
        """
        stop = stop or threading.Event()
        while not self.received:
            if stop.wait(poll_interval):
                break

        if self.received:
            logger.info("%s received, running exit hooks", signal.Signals(self.received[0]).name)
            return self.received[0]
        return 0


def wait_for_termination(stop: threading.Event | None = None, poll_interval: float = 0.5) -> int:
    """Block until SIGTERM or SIGINT is received, or stop is set."""
    with TerminationSignals() as signals:
        return signals.wait(stop, poll_interval)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.logs_dir)

    conf = Conf(settings)
    conf.log()

    with TerminationSignals() as signals:
        conf.run_init_hooks()

        if conf.oneshot:
            logger.info("Oneshot mode: running exit hooks now")
        else:
            logger.info("Init hooks done, waiting for termination signal")
            signals.wait()

        conf.run_exit_hooks()


if __name__ == "__main__":
    main()
