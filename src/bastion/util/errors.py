from __future__ import annotations

from pathlib import Path


class LauncherError(Exception):
    """Base error for domain failures that should be shown to the user."""


class InstallNotFoundError(LauncherError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Given install does not exist: {path}")
        self.path = path


class ExecError(LauncherError):
    """A launch that could not be started."""


class ExecutableNotFoundError(ExecError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class DirectoryAtExecutableError(ExecError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory at executable: {path}")
        self.path = path


class ProcessFailedError(ExecError):
    def __init__(self, path: "Path | str", error: OSError) -> None:
        super().__init__(f"Process failed: {error}")
        self.path = path
        self.error = error
