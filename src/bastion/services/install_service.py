from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BeamNGInstall:
    """Root directory of a BeamNG.drive installation."""

    path: Path

    @classmethod
    def init(cls, path: "str | os.PathLike[str]") -> "BeamNGInstall":
        return cls(Path(path))

    def exists(self) -> bool:
        """True if the root is an existing directory. Not cached, never raises."""
        return os.path.isdir(self.path)

    def resolve(self, relpath: str) -> Path:
        return self.path / relpath
