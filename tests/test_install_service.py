import os

import pytest

from bastion.services.install_service import BeamNGInstall


def test_missing_path(tmp_path):
    assert not BeamNGInstall.init(tmp_path / "missing").exists()


def test_regular_file(tmp_path):
    f = tmp_path / "file"
    f.write_text("x")
    assert not BeamNGInstall.init(f).exists()


def test_directory(tmp_path):
    assert BeamNGInstall.init(tmp_path).exists()
    assert BeamNGInstall.init(str(tmp_path)).exists()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_broken_link(tmp_path):
    link = tmp_path / "link"
    try:
        os.symlink(tmp_path / "gone", link)
    except OSError:
        pytest.skip("cannot create symlinks here")
    assert not BeamNGInstall.init(link).exists()


def test_exists_is_not_cached(tmp_path):
    root = tmp_path / "install"
    install = BeamNGInstall.init(root)
    assert not install.exists()
    root.mkdir()
    assert install.exists()
    root.rmdir()
    assert not install.exists()


def test_resolve_joins_onto_root(tmp_path):
    install = BeamNGInstall.init(tmp_path)
    assert install.resolve("Bin64/BeamNG.drive.x64.exe") == tmp_path / "Bin64" / "BeamNG.drive.x64.exe"


def test_name_too_long_is_not_an_install(tmp_path):
    assert BeamNGInstall.init(tmp_path / ("a" * 300)).exists() is False
