"""Logging helpers for simple_startup_log
"""
import logging
import os

from . import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(pid)s --- %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class PidFilter(logging.Filter):
    """Stamp every record with the pid handed to the logging setup."""

    def __init__(self, pid: str) -> None:
        super().__init__()
        self.pid = pid

    def filter(self, record: logging.LogRecord) -> bool:
        record.pid = self.pid
        return True


def setup_logging(pid: str | None = None, root: logging.Logger | None = None) -> None:
    """Install the pid-stamping handler on ``root`` (default: the root logger)."""
    level_name = config.LOG_LEVEL
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    if root is None:
        root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.addFilter(PidFilter(pid or str(os.getpid())))
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)


__all__ = ["DATE_FORMAT", "LOG_FORMAT", "PidFilter", "setup_logging"]
