"""A character-cell text screen with the drawing helpers used by the config UI."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

Char = Union[int, str]

BLANK = ord(" ")


class LineType(IntEnum):
    """Kinds of horizontal border line."""

    TOP = 0
    MID = 1
    BOTTOM = 2


_HCHAR = {
    False: {LineType.TOP: 0xA0, LineType.MID: ord("-"), LineType.BOTTOM: ord("_")},
    True: {LineType.TOP: 0xDC, LineType.MID: 0xD3, LineType.BOTTOM: ord("_")},
}

# Indexed by "right border?".
_VCHAR = {
    False: (ord("!"), ord("!")),
    True: (0xDA, 0xDF),
}


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if not 0 <= c <= 0xFF:
        raise ValueError(f"character code out of range: {c}")
    return c


def _glyph(code: int) -> str:
    value = code & 0x7F
    if value < 0x20:
        value += 0x40
    elif value == 0x7F:
        value = BLANK
    return chr(value)


class Screen:
    """A text screen holding one byte per cell.

    Cell values are the codes handed to ``cputc``; reverse mode flips the
    high bit, which selects the inverse character set.
    """

    def __init__(self, width: int = 40, height: int = 24, lower: bool = False) -> None:
        if width < 1 or height < 1:
            raise ValueError("screen must be at least 1x1")
        self.width = width
        self.height = height
        self.lower = lower
        self.x = 0
        self.y = 0
        self.reverse = False
        self._cells = [bytearray([BLANK]) * width for _ in range(height)]

    def clrscr(self) -> None:
        """Blank every cell and home the cursor."""
        for row in self._cells:
            row[:] = bytes([BLANK]) * self.width
        self.x = 0
        self.y = 0

    def gotoxy(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"position ({x}, {y}) is off screen")
        self.x = x
        self.y = y

    def revers(self, on: bool) -> bool:
        """Set reverse mode, returning the previous setting."""
        previous = self.reverse
        self.reverse = bool(on)
        return previous

    def _newline(self) -> None:
        self.y += 1
        if self.y >= self.height:
            self.y = 0

    def cputc(self, c: Char) -> None:
        code = _code(c)
        if code == 0x0D:
            self.x = 0
            return
        if code == 0x0A:
            self._newline()
            return
        if self.reverse:
            code ^= 0x80
        self._cells[self.y][self.x] = code
        self.x += 1
        if self.x >= self.width:
            self.x = 0
            self._newline()

    def cputs(self, s: Union[str, bytes, Iterable[Char]]) -> None:
        for ch in s:
            self.cputc(ch)

    def cputcxy(self, x: int, y: int, c: Char) -> None:
        self.gotoxy(x, y)
        self.cputc(c)

    def cputsxy(self, x: int, y: int, s: Union[str, bytes, Iterable[Char]]) -> None:
        self.gotoxy(x, y)
        self.cputs(s)

    def char_at(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"position ({x}, {y}) is off screen")
        return self._cells[y][x]

    def row(self, y: int) -> bytes:
        if not 0 <= y < self.height:
            raise ValueError(f"row {y} is off screen")
        return bytes(self._cells[y])

    def render(self) -> str:
        """Return the screen as plain text, one line per row."""
        return "\n".join("".join(_glyph(c) for c in row) for row in self._cells)


def hlinexy(screen: Screen, x: int, y: int, length: int, line_type: LineType) -> None:
    """Draw a horizontal border of ``length`` cells starting at (x, y)."""
    screen.gotoxy(x, y)
    value = _HCHAR[screen.lower][LineType(line_type)]
    for _ in range(length):
        screen.cputc(value)


def vlinexy(screen: Screen, x: int, y: int, length: int, right: bool) -> None:
    """Draw a vertical border of ``length`` cells going down from (x, y)."""
    value = _VCHAR[screen.lower][bool(right)]
    for offset in range(length):
        screen.cputcxy(x, y + offset, value)


def iputsxy(screen: Screen, x: int, y: int, s: Union[str, bytes]) -> None:
    """Write ``s`` in inverse video at (x, y)."""
    screen.gotoxy(x, y)
    if screen.lower:
        for ch in s:
            c = _code(ch)
            if 0x40 <= c <= 0x5F:
                c += 0x40
            else:
                c = (c + 0x80) & 0xFF
            screen.cputc(c)
    else:
        screen.revers(True)
        screen.cputs(s)
        screen.revers(False)


def draw_window(
    screen: Screen, x: int, y: int, width: int, height: int, title: str | None = None
) -> None:
    """Draw a bordered window with a centred title and a blank interior."""
    if width < 2 or height < 2:
        raise ValueError("window must be at least 2x2")
    inner = width - 2
    hlinexy(screen, x + 1, y, inner, LineType.TOP)
    if title and len(title) < inner:
        screen.cputsxy(x + 1 + (inner - len(title)) // 2, y, title)
    vlinexy(screen, x, y, height, False)
    vlinexy(screen, x + width - 1, y, height, True)
    for row in range(y + 1, y + height - 1):
        screen.gotoxy(x + 1, row)
        for _ in range(inner):
            screen.cputc(" ")
    hlinexy(screen, x + 1, y + height - 1, inner, LineType.BOTTOM)