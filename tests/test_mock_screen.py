from fujiconfig.mock_screen import main, render_mock
from fujiconfig.screen import Screen


def test_render_mock_text():
    s = Screen()
    render_mock(s)
    lines = s.render().splitlines()
    assert lines[2][1:].startswith("Host:tnfs.fujinet.online")
    assert " DISK IMAGES " in lines[0]
    assert "Select Device Slot" in lines[6]
    assert "R/O" in lines[17]


def test_render_mock_lowercase_markers():
    s = Screen(lower=True)
    render_mock(s)
    assert s.char_at(10, 13) == 0xD5
    assert s.char_at(32, 13) == 0xC8
    assert s.char_at(0, 0) == 0xDA
    assert s.char_at(39, 0) == 0xDF


def test_render_mock_plain_borders():
    s = Screen()
    render_mock(s)
    assert s.char_at(0, 10) == ord("!")
    assert s.char_at(5, 22) == ord("_")
    assert s.char_at(10, 13) == ord(" ")


def test_main_prints_screen(capsys):
    assert main(["--lowercase"]) == 0
    out = capsys.readouterr().out
    assert "Select Device Slot" in out
    assert len(out.splitlines()) == 24