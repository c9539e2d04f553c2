"""Compose and log the "Starting ..." and "Started ..." lines for an application."""

from __future__ import annotations

import logging
from typing import Any

from . import config, home, probes
from .models.stopwatch import StopWatch, current_millis

logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_NAME = "application"
DEFAULT_HOST_NAME = "localhost"


def append(message: str, prefix: str, value: str | None, default: str = "") -> str:
    """Append ``prefix + value`` to ``message``, space separated.

    Nothing is appended when both ``value`` and ``default`` are empty.
    """
    value = value or default
    if not value:
        return message
    separator = " " if message else ""
    return f"{message}{separator}{prefix}{value}"


class StartupInfoLogger:
    """Logs application information on startup.

    Args:
        entry: Class, function or module the application is started from. Its
            simple name, distribution version and load location appear in the
            messages. None reports the application as ``"application"``.
        pid: Process id to report. Defaults to the current process.
        in_test_harness: Suppress the load location, see :func:`home.locate`.
        host_name_threshold_ms: Host name lookups slower than this are warned about.
    """

    def __init__(
        self,
        entry: Any = None,
        *,
        pid: str | None = None,
        in_test_harness: bool = False,
        host_name_threshold_ms: int | None = None,
    ) -> None:
        self.entry = entry
        self.pid = pid if pid is not None else probes.current_pid()
        self.in_test_harness = in_test_harness
        self.host_name_threshold_ms = (
            host_name_threshold_ms
            if host_name_threshold_ms is not None
            else config.HOSTNAME_RESOLVE_THRESHOLD_MS
        )

    @property
    def application_name(self) -> str:
        return probes.entry_name(self.entry) or DEFAULT_APPLICATION_NAME

    def log_starting(self, log: logging.Logger) -> None:
        log.info(self.starting_message())

    def log_started(self, log: logging.Logger, stopwatch: StopWatch) -> None:
        log.info(self.started_message(stopwatch))

    def starting_message(self) -> str:
        message = f"Starting {self.application_name}"
        message = append(message, "v", probes.implementation_version(self.entry))
        message = append(message, "using Python ", probes.runtime_version())
        message = append(message, "on ", self._host_name())
        message = append(message, "with PID ", self.pid)
        return self._append_context(message)

    def started_message(self, stopwatch: StopWatch) -> str:
        message = (
            f"Started {self.application_name} in "
            f"{stopwatch.elapsed_seconds()!r} seconds"
        )
        uptime = probes.process_uptime_seconds()
        if uptime is not None:
            message += f" (Python running for {uptime!r})"
        return message

    def _host_name(self) -> str:
        start = current_millis()
        host_name = probes.resolve_host_name() or DEFAULT_HOST_NAME
        resolve_time = current_millis() - start
        if resolve_time > self.host_name_threshold_ms:
            warning = (
                f"socket.getaddrinfo(socket.gethostname()) took {resolve_time} "
                "milliseconds to respond. Please verify your network configuration"
            )
            if "mac" in probes.os_name().lower():
                warning += " (macOS machines may need to add entries to /etc/hosts)"
            logger.warning(warning + ".")
        return host_name

    def _append_context(self, message: str) -> str:
        context = ""
        source = home.locate(self.entry, in_test_harness=self.in_test_harness).source
        if source is not None:
            context = str(source)
        context = append(context, "started by ", probes.user_name())
        context = append(context, "in ", probes.working_directory())
        if context:
            message = f"{message} ({context})"
        return message


__all__ = ["StartupInfoLogger", "append"]
