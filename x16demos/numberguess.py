"""Guess-the-number game seeded by the time taken to press enter."""

from __future__ import annotations

import random
import sys
import time
from enum import Enum
from typing import Callable, TextIO


class GuessResult(Enum):
    """How a guess compares with the secret number."""

    LOW = "too low!"
    HIGH = "too high!"
    CORRECT = "correct"


def judge_guess(guess: int, number: int) -> GuessResult:
    """Compare a guess with the secret number."""
    if guess < number:
        return GuessResult.LOW
    if guess > number:
        return GuessResult.HIGH
    return GuessResult.CORRECT


def secret_number(seed: int) -> int:
    """Pick a number from 1 to 10 determined by ``seed``."""
    return random.Random(seed).randint(1, 10)


class _Scanner:
    """Character and token reading over a text stream, with one-character pushback."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def getc(self) -> str:
        if self._pending:
            return self._pending.pop()
        return self._stream.read(1)

    def _skip_space(self) -> str:
        ch = self.getc()
        while ch and ch.isspace():
            ch = self.getc()
        if not ch:
            raise EOFError("input ended")
        return ch

    def read_int(self) -> int:
        ch = self._skip_space()
        digits = ""
        if ch in "+-":
            digits, ch = ch, self.getc()
        while ch and ch.isdigit():
            digits += ch
            ch = self.getc()
        if ch:
            self._pending.append(ch)
        if not digits.lstrip("+-"):
            raise ValueError("expected a number")
        return int(digits)

    def read_symbol(self) -> str:
        return self._skip_space()

    def skip_line(self) -> None:
        ch = self.getc()
        while ch and ch != "\n":
            ch = self.getc()


def play(
    inp: TextIO,
    out: TextIO,
    clock: Callable[[], int] = time.perf_counter_ns,
) -> int:
    """Play rounds until the player declines; return the fewest guesses taken."""
    scanner = _Scanner(inp)
    best = 0

    out.write("\n")
    out.write("welcome cx16 number guessing game!\n")
    out.write("-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-=-\n")
    out.write("\n")

    while True:
        out.write("generating a new number!\n\n")
        out.write("press enter to start...\n")

        start = clock()
        scanner.getc()
        end = clock()

        number = secret_number(int(end - start))
        attempts = 1

        out.write("\n")
        out.write("guess a number between 1 and 10: ")

        while True:
            guess = scanner.read_int()
            out.write("\n")
            result = judge_guess(guess, number)
            if result is GuessResult.CORRECT:
                break
            out.write(f"{result.value}\n")
            out.write("guess again: ")
            attempts += 1

        if attempts < best or best == 0:
            best = attempts

        out.write("\ncongratulations!\n\n")
        out.write(f"you guessed the number in {attempts} tries!\n\n")

        out.write("do you want to play again? (y/n): ")
        again = scanner.read_symbol()
        out.write("\n\n")
        if again not in ("y", "Y"):
            break

    out.write(f"thanks for playing, your lowest number of guesses was {best}!\n\n")
    scanner.skip_line()
    scanner.getc()
    return best


def main(argv: list[str] | None = None) -> int:
    """Play the game on standard input and output."""
    try:
        play(sys.stdin, sys.stdout)
    except (EOFError, ValueError) as exc:
        sys.stdout.write("\n")
        sys.stderr.write(f"numberguess: {exc}\n")
        return 1
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())