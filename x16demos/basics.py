"""The smallest console programs: doing nothing, one character, one line."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

_GREETING = "Hello, World!"


def first_program() -> int:
    """Do nothing and report success."""
    return 0


def hello_char(out: TextIO) -> None:
    """Write a single character."""
    out.write("x")


def hello_world(out: TextIO) -> None:
    """Write the classic greeting followed by a newline."""
    out.write(f"{_GREETING}\n")


def print_string(text: str, out: TextIO) -> None:
    """Write ``text`` up to, but not including, the first NUL character."""
    out.write(text.partition("\0")[0])


def main(argv: list[str] | None = None) -> int:
    """Run one of the basic demos on standard output."""
    parser = argparse.ArgumentParser(description="Run a basic console demo.")
    parser.add_argument(
        "demo",
        nargs="?",
        default="helloworld",
        choices=["firstprg", "hellochar", "helloworld", "printnts"],
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    if args.demo == "firstprg":
        return first_program()
    if args.demo == "hellochar":
        hello_char(out)
    elif args.demo == "helloworld":
        hello_world(out)
    else:
        print_string(_GREETING, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())