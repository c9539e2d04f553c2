"""Application lifecycle: log "Starting", run the application, log "Started".

Usage::

    class Demo(SimpleApplication):
        def run(self) -> None:
            serve_forever()

    if __name__ == "__main__":
        run_app(Demo)
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from . import config, probes
from .logger import setup_logging
from .models.stopwatch import StopWatch
from .startup_info import StartupInfoLogger

logger = logging.getLogger(__name__)


class SimpleApplication(ABC):
    """Base class for applications started through :func:`run_app`."""

    @abstractmethod
    def run(self) -> None:
        """Do the application's work. May block for the life of the process."""

    def banner(self) -> str | None:
        """Text printed to stdout once the application has started."""
        return None


class LifecycleState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    STOPPED = "stopped"
    REPORTED = "reported"


class ApplicationRunner:
    """Runs one application once and reports its startup.

    Errors raised while creating or running the application propagate
    unchanged; the runner then stays in RUNNING and no "Started" line is
    logged.
    """

    def __init__(
        self,
        factory: Callable[[], Any],
        *,
        entry: Any = None,
        log: logging.Logger | None = None,
        in_test_harness: bool = False,
        configure_logging: bool = True,
        print_banner: bool | None = None,
    ) -> None:
        self.factory = factory
        self.entry = entry if entry is not None else factory
        self.log = log
        self.in_test_harness = in_test_harness
        self.configure_logging = configure_logging
        self.print_banner = (
            print_banner if print_banner is not None else config.PRINT_BANNER
        )
        self.state = LifecycleState.NOT_STARTED
        self.application: Any = None

    def run(self) -> Any:
        if self.state is not LifecycleState.NOT_STARTED:
            raise RuntimeError(f"application already started (state={self.state.value})")

        # The pid must reach the logging setup before any startup line is logged.
        pid = probes.current_pid()
        if self.configure_logging:
            setup_logging(pid=pid)

        stopwatch = StopWatch()
        startup_info = StartupInfoLogger(
            self.entry, pid=pid, in_test_harness=self.in_test_harness
        )
        startup_logger = self.log or logging.getLogger(self._logger_name())

        self.state = LifecycleState.RUNNING
        startup_info.log_starting(startup_logger)
        stopwatch.start()
        self.application = self.factory()
        self.application.run()
        stopwatch.stop()
        self.state = LifecycleState.STOPPED

        startup_info.log_started(startup_logger, stopwatch)
        self.state = LifecycleState.REPORTED
        if self.print_banner:
            self._print_banner()
        return self.application

    def _print_banner(self) -> None:
        banner_fn = getattr(self.application, "banner", None)
        if banner_fn is None:
            return
        banner = banner_fn()
        if banner:
            print(banner)

    def _logger_name(self) -> str:
        module = probes.entry_module(self.entry)
        return module.__name__ if module is not None else __name__


def run_app(
    factory: Callable[[], Any],
    *,
    entry: Any = None,
    log: logging.Logger | None = None,
    in_test_harness: bool = False,
    configure_logging: bool = True,
) -> Any:
    """Create the application with ``factory``, run it and log its startup.

    Args:
        factory: A :class:`SimpleApplication` subclass or any zero-argument
            callable returning an object with a ``run()`` method.
        entry: Object whose name, version and location are reported. Defaults
            to ``factory``.
        log: Logger receiving the startup lines. Defaults to the logger named
            after the entry's module.
        in_test_harness: Do not report the load location.
        configure_logging: Call :func:`setup_logging` with this process's pid.

    Returns:
        The application instance, after ``run()`` has returned.
    """
    runner = ApplicationRunner(
        factory,
        entry=entry,
        log=log,
        in_test_harness=in_test_harness,
        configure_logging=configure_logging,
    )
    return runner.run()


__all__ = ["ApplicationRunner", "LifecycleState", "SimpleApplication", "run_app"]
