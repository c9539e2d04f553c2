"""Locate the application home: the archive or directory the entry code was loaded from.

Picks a sensible home for zipped applications (``.pyz``, eggs, wheels on
``sys.path``), source checkouts and directly run scripts. When nothing can be
determined the working directory is used.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from . import probes
from .models.home import ApplicationHome

logger = logging.getLogger(__name__)

# Separator between an archive and the member path inside it.
ARCHIVE_SEPARATOR = "!/"


def locate(entry: Any = None, *, in_test_harness: bool = False) -> ApplicationHome:
    """Build an :class:`ApplicationHome` for ``entry``.

    Args:
        entry: A class, function, instance or module from the application, or
            None to use the working directory.
        in_test_harness: When True the source is never reported, so a test
            runner's temporary directory is not mistaken for the home.

    Returns:
        ApplicationHome with absolute paths. Never raises.
    """
    source = None if in_test_harness else find_source(entry)
    return ApplicationHome(dir=find_home_dir(source), source=source)


def find_source(entry: Any) -> Path | None:
    if entry is None:
        return None
    try:
        location = _module_location(entry)
        if location is None:
            return None
        source = _root_archive(_import_root(location))
        if source.exists():
            return source.absolute()
    except (OSError, AttributeError, KeyError, TypeError, ValueError):
        logger.debug("could not resolve source for %r", entry, exc_info=True)
    return None


def find_home_dir(source: Path | None) -> Path:
    home_dir = source if source is not None else _default_home_dir()
    try:
        if home_dir.is_file():
            home_dir = home_dir.parent
        if not home_dir.exists():
            home_dir = Path(".")
        return home_dir.absolute()
    except OSError:
        logger.debug("could not inspect %s", home_dir, exc_info=True)
        return Path(os.path.abspath(os.curdir))


def _default_home_dir() -> Path:
    cwd = probes.working_directory()
    return Path(cwd) if cwd else Path(".")


def _module_location(entry: Any) -> Path | None:
    module = probes.entry_module(entry)
    if module is None:
        return None
    filename = getattr(module, "__file__", None)
    if not filename:
        return None
    return Path(os.path.abspath(filename))


def _import_root(location: Path) -> Path:
    """Return the longest ``sys.path`` entry containing ``location``, else ``location``."""
    best: Path | None = None
    for entry in sys.path:
        if not isinstance(entry, str):
            continue
        root = Path(os.path.abspath(entry or os.curdir))
        if root == location or root not in location.parents:
            continue
        if best is None or len(root.parts) > len(best.parts):
            best = root
    return best if best is not None else location


def _root_archive(location: Path) -> Path:
    """Strip an inner member path so only the outermost archive remains."""
    text = str(location)
    separator = text.find(ARCHIVE_SEPARATOR)
    if separator > 0:
        return Path(text[:separator])

    if location.exists():
        return location
    for parent in reversed(location.parents):
        if parent.is_file():
            return parent
    return location


__all__ = ["ARCHIVE_SEPARATOR", "find_home_dir", "find_source", "locate"]
