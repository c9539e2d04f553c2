"""Environment probes used when composing startup messages.

Each probe answers one question about the running process and returns None
when the answer is unavailable. Callers pick their own fallback values.
"""

from __future__ import annotations

import getpass
import logging
import os
import platform
import socket
import sys
import time
from importlib import metadata
from types import ModuleType
from typing import Any

import psutil

logger = logging.getLogger(__name__)


def current_pid() -> str:
    return str(os.getpid())


def resolve_host_name() -> str | None:
    """Return the local host name, or None if it does not resolve.

    The name is checked with a forward lookup (IPv4 or IPv6) so a host missing
    from DNS and /etc/hosts is treated the same as one with no name at all.
    """
    try:
        name = socket.gethostname()
        socket.getaddrinfo(name, None)
    except OSError:
        logger.debug("host name resolution failed", exc_info=True)
        return None
    return name or None


def runtime_version() -> str:
    return platform.python_version()


def os_name() -> str:
    return platform.platform()


def user_name() -> str | None:
    try:
        return getpass.getuser() or None
    except (OSError, KeyError, ImportError):
        logger.debug("user name lookup failed", exc_info=True)
        return None


def working_directory() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        logger.debug("working directory lookup failed", exc_info=True)
        return None


def process_uptime_seconds() -> float | None:
    """Seconds since this interpreter process was created, millisecond precision."""
    try:
        created = psutil.Process().create_time()
    except (psutil.Error, OSError):
        logger.debug("process uptime unavailable", exc_info=True)
        return None
    return int((time.time() - created) * 1000) / 1000.0


def entry_module(entry: Any) -> ModuleType | None:
    """Return the module that defines ``entry`` (or ``entry`` itself if it is a module)."""
    if entry is None:
        return None
    if isinstance(entry, ModuleType):
        return entry
    module_name = getattr(entry, "__module__", None)
    if not module_name:
        module_name = getattr(type(entry), "__module__", None)
    if not module_name:
        return None
    return sys.modules.get(module_name)


def entry_name(entry: Any) -> str | None:
    """Return the simple name of ``entry``: no module path, no outer classes."""
    if entry is None:
        return None
    if isinstance(entry, ModuleType):
        return entry.__name__.rsplit(".", 1)[-1]
    name = getattr(entry, "__qualname__", None) or getattr(entry, "__name__", None)
    if not name:
        name = type(entry).__qualname__
    name = name.rsplit(".", 1)[-1]
    # lambdas, genexprs and other synthetic callables have no usable name
    if not name or name.startswith("<"):
        return None
    return name


def implementation_version(entry: Any) -> str | None:
    """Return the version of the distribution that ships ``entry``'s top-level package.

    Falls back to the package's ``__version__`` attribute for code that is not
    installed as a distribution.
    """
    module = entry_module(entry)
    if module is None:
        return None
    module_name = module.__name__
    if module_name == "__main__":
        # `python -m pkg.mod` keeps the real name on the spec; plain scripts have none
        spec = getattr(module, "__spec__", None)
        module_name = getattr(spec, "name", None)
        if not module_name or module_name == "__main__":
            return None
    top_level = module_name.split(".", 1)[0]

    try:
        distributions = metadata.packages_distributions().get(top_level, [])
    except (OSError, ValueError):
        logger.debug("distribution lookup failed for %s", top_level, exc_info=True)
        distributions = []
    for dist_name in distributions:
        try:
            version = metadata.version(dist_name)
        except metadata.PackageNotFoundError:
            continue
        if version:
            return version

    package = sys.modules.get(top_level)
    version = getattr(package, "__version__", None)
    if isinstance(version, str) and version:
        return version
    return None


__all__ = [
    "current_pid",
    "entry_module",
    "entry_name",
    "implementation_version",
    "os_name",
    "process_uptime_seconds",
    "resolve_host_name",
    "runtime_version",
    "user_name",
    "working_directory",
]
