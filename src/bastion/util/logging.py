from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .runtime import is_windows


def default_log_path() -> Path:
    """Default log file path.

    Prefer `%LOCALAPPDATA%/bastion/logs/bastion.log` on Windows and
    `$XDG_STATE_HOME/bastion/bastion.log` elsewhere, fallback to `%TEMP%`.
    """
    if is_windows():
        base = os.environ.get("LOCALAPPDATA")
        if base:
            return Path(base) / "bastion" / "logs" / "bastion.log"
    else:
        state = os.environ.get("XDG_STATE_HOME")
        if state:
            return Path(state) / "bastion" / "bastion.log"
        home = os.environ.get("HOME")
        if home:
            return Path(home) / ".local" / "state" / "bastion" / "bastion.log"
    return Path(tempfile.gettempdir()) / "bastion" / "bastion.log"


def configure_logging(level: int = logging.INFO, log_path: Path | None = None) -> Path:
    log_path = log_path or default_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers: list[logging.Handler] = [
        logging.FileHandler(log_path, encoding="utf-8"),
    ]

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )
    return log_path
