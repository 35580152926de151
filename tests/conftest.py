import pytest

from bastion.constants import LINUX_EXEC_PATH, WINDOWS_EXEC_PATH, WINDOWS_LAUNCHER_PATH
from bastion.services import game_service


@pytest.fixture
def install_root(tmp_path):
    """A fake BeamNG.drive install with every binary the launcher looks for."""
    root = tmp_path / "BeamNG.drive"
    for rel in (WINDOWS_EXEC_PATH, WINDOWS_LAUNCHER_PATH, LINUX_EXEC_PATH):
        exe = root / rel
        exe.parent.mkdir(parents=True, exist_ok=True)
        exe.write_bytes(b"stub")
    return root


@pytest.fixture
def spawned(monkeypatch):
    """Record argv passed to the process runner instead of starting anything."""
    calls = []

    def _fake_run(argv):
        calls.append(list(argv))
        return 0

    monkeypatch.setattr(game_service.runtime, "run_foreground", _fake_run)
    return calls


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("BASTION_SETTINGS", str(tmp_path / "settings" / "settings.json"))
    return tmp_path / "settings" / "settings.json"
