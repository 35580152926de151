from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _gfx_args(gfx_api: Optional[str]) -> list[str]:
    if gfx_api is None:
        return []
    return ["-gfx", gfx_api]


@dataclass(frozen=True)
class CommonArgs:
    """Game arguments understood by the Windows binary."""

    console: bool = False
    gfx_api: Optional[str] = None

    def to_args(self) -> list[str]:
        a: list[str] = []
        if self.console:
            a.append("-console")
        a.extend(_gfx_args(self.gfx_api))
        return a


@dataclass(frozen=True)
class LinuxArgs:
    """Game arguments understood by the Linux binary (no console)."""

    gfx_api: Optional[str] = None

    def to_args(self) -> list[str]:
        return _gfx_args(self.gfx_api)
