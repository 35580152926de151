from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..constants import (
    DEFAULT_STEAM_EXEC,
    GPTK_WINE_PATH,
    LINUX_EXEC_PATH,
    STEAM_URI,
    WINDOWS_EXEC_PATH,
    WINDOWS_LAUNCHER_PATH,
    WINDOWS_SHELL,
    WINDOWS_SHELL_FLAGS,
)
from ..util import runtime
from ..util.errors import (
    DirectoryAtExecutableError,
    ExecutableNotFoundError,
    ProcessFailedError,
)
from .args_service import CommonArgs, LinuxArgs
from .install_service import BeamNGInstall


@dataclass(frozen=True)
class Steam:
    """Opens the game through the Steam client. No game arguments."""

    steam_path: Optional[Path] = None


@dataclass(frozen=True)
class WindowsDirect:
    install: BeamNGInstall
    args: CommonArgs = field(default_factory=CommonArgs)


@dataclass(frozen=True)
class WindowsIndirect:
    """Opens the game's launcher, which collects options itself."""

    install: BeamNGInstall


@dataclass(frozen=True)
class LinuxDirect:
    install: BeamNGInstall
    args: LinuxArgs = field(default_factory=LinuxArgs)


@dataclass(frozen=True)
class MacGPTK:
    """Runs the Windows binary through the Apple Game Porting Toolkit."""

    install: BeamNGInstall
    gptk_path: Path
    args: CommonArgs = field(default_factory=CommonArgs)


@dataclass(frozen=True)
class MacGPTKIndirect:
    install: BeamNGInstall
    gptk_path: Path


ExecMethod = Union[Steam, WindowsDirect, WindowsIndirect, LinuxDirect, MacGPTK, MacGPTKIndirect]


class Invocation(enum.Enum):
    DIRECT = "direct"
    SHELL = "shell"
    WRAPPED = "wrapped"


@dataclass(frozen=True)
class ResolvedExecutable:
    """Binary to start for one launch attempt, and how to start it."""

    path: Path
    invocation: Invocation
    args: tuple[str, ...] = ()
    runtime: Optional[Path] = None
    # False when the binary is looked up by the OS rather than in an install.
    verify: bool = True

    def argv(self) -> list[str]:
        if self.invocation is Invocation.SHELL:
            head = [WINDOWS_SHELL, *WINDOWS_SHELL_FLAGS, str(self.path)]
        elif self.invocation is Invocation.WRAPPED:
            if self.runtime is None:
                raise ValueError("wrapped invocation requires a runtime binary")
            head = [str(self.runtime), str(self.path)]
        else:
            head = [str(self.path)]
        return head + list(self.args)


def gptk_wine(gptk_path: Path) -> Path:
    return Path(gptk_path) / GPTK_WINE_PATH


def resolve(method: ExecMethod) -> ResolvedExecutable:
    """Compose the executable path, invocation and arguments for a method.

    Pure: the filesystem is not touched here, see `check_executable`.
    """
    if isinstance(method, Steam):
        steam_exec = Path(method.steam_path) if method.steam_path else Path(DEFAULT_STEAM_EXEC)
        return ResolvedExecutable(
            path=steam_exec,
            invocation=Invocation.DIRECT,
            args=(STEAM_URI,),
            verify=False,
        )
    if isinstance(method, WindowsDirect):
        return ResolvedExecutable(
            path=method.install.resolve(WINDOWS_EXEC_PATH),
            invocation=Invocation.SHELL,
            args=tuple(method.args.to_args()),
        )
    if isinstance(method, WindowsIndirect):
        return ResolvedExecutable(
            path=method.install.resolve(WINDOWS_LAUNCHER_PATH),
            invocation=Invocation.SHELL,
        )
    if isinstance(method, LinuxDirect):
        return ResolvedExecutable(
            path=method.install.resolve(LINUX_EXEC_PATH),
            invocation=Invocation.DIRECT,
            args=tuple(method.args.to_args()),
        )
    if isinstance(method, MacGPTK):
        return ResolvedExecutable(
            path=method.install.resolve(WINDOWS_EXEC_PATH),
            invocation=Invocation.WRAPPED,
            args=tuple(method.args.to_args()),
            runtime=gptk_wine(method.gptk_path),
        )
    if isinstance(method, MacGPTKIndirect):
        return ResolvedExecutable(
            path=method.install.resolve(WINDOWS_LAUNCHER_PATH),
            invocation=Invocation.WRAPPED,
            runtime=gptk_wine(method.gptk_path),
        )
    raise TypeError(f"Unknown launch method: {type(method).__name__}")


def check_executable(path: Path) -> None:
    """Raise unless `path` is an existing non-directory. Checked on every call.

    A path that cannot be stat-ed counts as missing.
    """
    if not os.path.exists(path):
        raise ExecutableNotFoundError(path)
    if os.path.isdir(path):
        raise DirectoryAtExecutableError(path)


def launch(method: ExecMethod) -> int:
    """Start the game for `method` and wait for the process to exit.

    Returns the child's exit status. A non-zero status is not an error: it
    only means the OS started the process and the game exited that way.
    The GPTK runtime root is not checked here.
    """
    resolved = resolve(method)
    if resolved.verify:
        check_executable(resolved.path)

    argv = resolved.argv()
    try:
        return runtime.run_foreground(argv)
    except OSError as e:
        raise ProcessFailedError(argv[0], e) from e
