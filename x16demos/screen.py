"""Coloured text console with the sixteen-colour default palette."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import TextIO

# Default palette as 12-bit RGB, one hex nibble per channel.
_PALETTE = (
    0x000, 0xFFF, 0x800, 0xAFE, 0xC4C, 0x0C5, 0x00A, 0xEE7,
    0xD85, 0x640, 0xF77, 0x333, 0x777, 0xAF6, 0x08F, 0xBBB,
)


class Color(IntEnum):
    """The sixteen console colours."""

    BLACK = 0
    WHITE = 1
    RED = 2
    CYAN = 3
    PURPLE = 4
    GREEN = 5
    BLUE = 6
    YELLOW = 7
    ORANGE = 8
    BROWN = 9
    PINK = 10
    LIGHTRED = 10
    GRAY1 = 11
    GRAY2 = 12
    LIGHTGREEN = 13
    LIGHTBLUE = 14
    GRAY3 = 15

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The colour as 8-bit red, green and blue components."""
        value = _PALETTE[self.value]
        return tuple(((value >> shift) & 0xF) * 17 for shift in (8, 4, 0))


def _sgr(foreground: Color, background: Color) -> str:
    fr, fg, fb = foreground.rgb
    br, bg, bb = background.rgb
    return f"\x1b[38;2;{fr};{fg};{fb};48;2;{br};{bg};{bb}m"


class Console:
    """A text console that writes ANSI-coloured output to a stream."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self.text_color = Color.WHITE
        self.background = Color.BLUE

    def textcolor(self, color: int) -> Color:
        """Set the text colour and return the previous one."""
        previous, self.text_color = self.text_color, Color(color)
        return previous

    def bgcolor(self, color: int) -> Color:
        """Set the background colour and return the previous one."""
        previous, self.background = self.background, Color(color)
        return previous

    def clrscr(self) -> None:
        """Clear the screen with the current background colour."""
        self.out.write(f"{_sgr(self.text_color, self.background)}\x1b[2J\x1b[H\x1b[0m")

    def write(self, text: str) -> None:
        """Write text in the current colours."""
        self.out.write(f"{_sgr(self.text_color, self.background)}{text}\x1b[0m")


_BLOCK_ORDER = (
    Color.BLACK, Color.WHITE, Color.CYAN, Color.PURPLE,
    Color.GREEN, Color.BLUE, Color.YELLOW, Color.ORANGE,
    Color.BROWN, Color.PINK, Color.LIGHTRED, Color.GRAY1,
    Color.GRAY2, Color.LIGHTGREEN, Color.LIGHTBLUE, Color.GRAY3,
)


def set_screen(console: Console) -> None:
    """Paint the whole screen red with black text."""
    console.textcolor(Color.BLACK)
    console.bgcolor(Color.RED)
    console.clrscr()


def print_block(console: Console, color: int) -> None:
    """Print one blank cell in the given background colour."""
    console.bgcolor(color)
    console.write(" ")


def restore_colors(console: Console, txtcol: int, bgcol: int) -> None:
    """Put back the given text and background colours."""
    console.textcolor(txtcol)
    console.bgcolor(bgcol)


def color_blocks(console: Console) -> None:
    """Show one block of every palette colour, then restore the old colours."""
    txtcol = console.textcolor(Color.WHITE)
    bgcol = console.bgcolor(Color.BLUE)
    console.clrscr()
    for color in _BLOCK_ORDER:
        print_block(console, color)
    restore_colors(console, txtcol, bgcol)


def main(argv: list[str] | None = None) -> int:
    """Run one of the screen colour demos on standard output."""
    parser = argparse.ArgumentParser(description="Run a screen colour demo.")
    parser.add_argument(
        "demo", nargs="?", default="colorblocks", choices=["setscreen", "colorblocks"]
    )
    args = parser.parse_args(argv)
    console = Console(sys.stdout)
    if args.demo == "setscreen":
        set_screen(console)
    else:
        color_blocks(console)
        sys.stdout.write("\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())