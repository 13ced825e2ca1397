import pytest

from fujiconfig.host import Apple2Host, AtariHost, host_for_target
from fujiconfig.screen import Screen


def _filled_screen():
    s = Screen()
    s.cputsxy(0, 0, "HELLO")
    return s


def test_apple2_display_clears_screen():
    s = _filled_screen()
    host = host_for_target("apple2enh", s)
    host.display_legacy_hosts_devices()
    assert host.screen is s
    assert s.row(0) == b" " * s.width


def test_atari_display_leaves_screen():
    s = _filled_screen()
    host = host_for_target("atarixl", s)
    host.display_legacy_hosts_devices()
    assert s.row(0).startswith(b"HELLO")


def test_init_and_cleanup_leave_screen():
    for cls in (Apple2Host, AtariHost):
        s = _filled_screen()
        host = cls(s)
        host.init()
        host.cleanup()
        assert s.row(0).startswith(b"HELLO")


def test_unknown_target_raises():
    with pytest.raises(ValueError):
        host_for_target("c64", Screen())