from __future__ import annotations

import json
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from ..constants import SETTINGS_ENV, SETTINGS_FILENAME
from ..util.runtime import is_windows


@dataclass(frozen=True)
class LauncherSettings:
    steam_exec: str = ""
    gptk_path: str = ""
    log_level: str = "INFO"


def default_settings_path() -> Path:
    """Settings file location, overridable with `BASTION_SETTINGS`."""
    override = os.environ.get(SETTINGS_ENV)
    if override:
        return Path(override)
    if is_windows():
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "bastion" / SETTINGS_FILENAME
    else:
        base = os.environ.get("XDG_CONFIG_HOME")
        if base:
            return Path(base) / "bastion" / SETTINGS_FILENAME
        home = os.environ.get("HOME")
        if home:
            return Path(home) / ".config" / "bastion" / SETTINGS_FILENAME
    return Path(tempfile.gettempdir()) / "bastion" / SETTINGS_FILENAME


def load_settings(settings_file: Optional[Path] = None) -> LauncherSettings:
    """Load launcher settings (best-effort). Returns defaults if missing or unreadable."""
    settings_file = settings_file or default_settings_path()
    try:
        data = json.loads(settings_file.read_text("utf-8"))
    except FileNotFoundError:
        return LauncherSettings()
    except (OSError, ValueError):
        return LauncherSettings()
    if not isinstance(data, dict):
        return LauncherSettings()

    defaults = LauncherSettings()
    return LauncherSettings(
        steam_exec=str(data.get("steam_exec") or defaults.steam_exec),
        gptk_path=str(data.get("gptk_path") or defaults.gptk_path),
        log_level=str(data.get("log_level") or defaults.log_level).upper(),
    )


def save_settings(settings: LauncherSettings, settings_file: Optional[Path] = None) -> Path:
    """Persist settings as JSON. Returns the file written."""
    settings_file = settings_file or default_settings_path()
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    settings_file.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
    return settings_file
