"""Entrypoint for launching an application by import path.

    python -m simple_startup_log.main mypackage.server:Server
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import Any, Callable

from .application import run_app

logger = logging.getLogger(__name__)


def load_factory(target: str) -> Callable[[], Any]:
    """Import ``"package.module:attribute"`` and return the attribute.

    Raises:
        ValueError: ``target`` is not of the form ``module:attribute``, the
            attribute does not exist or is not callable.
        ImportError: the module cannot be imported.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"expected 'module:attribute', got {target!r}")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ValueError(f"{target!r} not found") from e
    if not callable(obj):
        raise ValueError(f"{target!r} is not callable")
    return obj


def run(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        raise SystemExit("usage: python -m simple_startup_log.main module:attribute")
    run_app(load_factory(args[0]))


if __name__ == "__main__":
    run()
