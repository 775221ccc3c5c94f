"""A text menu driven by single-character selections."""

from __future__ import annotations

import sys
from typing import TextIO

MENU_HEADER = "MENU"
HELLO_MENU = "[1] SAY HELLO"
GOODBYE_MENU = "[2] SAY GOODBYE"
QUIT_MENU = "[3] QUIT"
PROMPT = "SELECTION >"
HELLO_MSG = "HELLO!"
GOODBYE_MSG = "GOODBYE!"
QUIT_MSG = "QUITTING..."

_RESPONSES = {"1": HELLO_MSG, "2": GOODBYE_MSG, "3": QUIT_MSG}


def show_menu(out: TextIO) -> None:
    """Write the menu and the selection prompt."""
    out.write(
        f"{MENU_HEADER}\n\n{HELLO_MENU}\n{GOODBYE_MENU}\n{QUIT_MENU}\n\n{PROMPT} "
    )


def run_menu(inp: TextIO, out: TextIO) -> bool:
    """Read selections one character at a time until quit is chosen.

    Every character read, newlines included, counts as a selection.
    Returns True when the user quit, False when the input ran out.
    """
    while True:
        show_menu(out)
        choice = inp.read(1)
        out.write("\n")
        if not choice:
            return False
        response = _RESPONSES.get(choice)
        if response is not None:
            out.write(f"{response}\n")
        out.write("\n")
        if choice == "3":
            return True


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())