"""Draws a static mock-up of the disk image selection screen."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from fujiconfig.screen import LineType, Screen, hlinexy, iputsxy, vlinexy

_ENTRIES = ["CHAT", "COVi", "elec", "fn-c", "fuji", "fuji", "ling",
            "neon", "WC22", "weat", "wiki", "www.", "YAIL"]


def render_mock(screen: Screen) -> None:
    """Draw the mock-up onto ``screen``, honouring its lowercase setting."""
    screen.clrscr()

    hlinexy(screen, 1, 0, 38, LineType.TOP)
    hlinexy(screen, 1, 5, 38, LineType.MID)
    hlinexy(screen, 1, 22, 38, LineType.BOTTOM)
    vlinexy(screen, 0, 0, 24, False)
    vlinexy(screen, 39, 0, 24, True)

    iputsxy(screen, 13, 0, " DISK IMAGES ")
    iputsxy(screen, 1, 23, " <>      TAB      Ret        ESC ")
    screen.cputsxy(5, 23, "Move")
    screen.cputsxy(14, 23, "Next")
    screen.cputsxy(23, 23, "Choose")
    screen.cputsxy(34, 23, "Exit")

    screen.cputsxy(1, 2, "Host:tnfs.fujinet.online")
    screen.cputsxy(1, 3, "Fltr:")
    screen.cputsxy(1, 4, "Path:")
    for row, name in enumerate(_ENTRIES, start=6):
        screen.cputsxy(2, row, name)

    hlinexy(screen, 7, 6, 26, LineType.TOP)
    hlinexy(screen, 7, 18, 26, LineType.BOTTOM)
    vlinexy(screen, 6, 6, 13, False)
    vlinexy(screen, 33, 6, 13, True)

    iputsxy(screen, 10, 6, " Select Device Slot ")
    for slot in range(1, 6):
        screen.cputsxy(9, 7 + slot, f"{slot} <Empty>")
    screen.cputsxy(9, 13, "6")
    iputsxy(screen, 11, 13, "<Empty>              ")
    if screen.lower:
        screen.cputcxy(10, 13, 0xD5)
        screen.cputcxy(32, 13, 0xC8)
    screen.cputsxy(9, 14, "7 <Empty>")
    screen.cputsxy(9, 15, "8 <Empty>")
    screen.cputsxy(7, 17, "Mode:              R/W")
    iputsxy(screen, 18, 17, " R/O ")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show the disk image screen mock-up.")
    parser.add_argument("--lowercase", action="store_true",
                        help="use the lowercase/MouseText character set")
    args = parser.parse_args(argv)
    screen = Screen(lower=args.lowercase)
    render_mock(screen)
    print(screen.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())