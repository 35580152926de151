import pytest

from bastion.services.args_service import CommonArgs, LinuxArgs


def test_empty_common_args():
    assert CommonArgs().to_args() == []
    assert CommonArgs(console=False, gfx_api=None).to_args() == []


def test_console_only():
    assert CommonArgs(console=True).to_args() == ["-console"]


@pytest.mark.parametrize("api", ["dx11", "vulkan"])
def test_console_precedes_gfx(api):
    assert CommonArgs(console=True, gfx_api=api).to_args() == ["-console", "-gfx", api]


def test_gfx_is_two_tokens():
    assert CommonArgs(gfx_api="vulkan").to_args() == ["-gfx", "vulkan"]


def test_linux_args():
    assert LinuxArgs().to_args() == []
    assert LinuxArgs(gfx_api="vulkan").to_args() == ["-gfx", "vulkan"]
    assert "-console" not in LinuxArgs(gfx_api="dx11").to_args()


def test_no_quoting_applied():
    assert CommonArgs(gfx_api="a b").to_args() == ["-gfx", "a b"]
