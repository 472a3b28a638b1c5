"""Where a parsed devfile came from."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class DevfileCtx:
    """Source location of a devfile; ``path`` is None for in-memory data."""

    path: Path | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> "DevfileCtx":
        return cls(path=Path(path).resolve())

    def dir(self) -> Path:
        """Directory holding the devfile, or the current directory."""
        if self.path is None:
            return Path.cwd()
        return self.path.parent
