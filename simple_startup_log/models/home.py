"""Application home value object."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ApplicationHome:
    """Where the application was loaded from.

    ``source`` is the archive, import root or module file the entry code came
    from, or None when it cannot be determined. ``dir`` is never None.
    """

    dir: Path
    source: Path | None = None

    def __str__(self) -> str:
        return str(self.dir)
