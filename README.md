# x16demos

A handful of small console programs for learning the basics of terminal
programs: printing characters and strings, setting screen colours, reading
menu choices and playing a number guessing game.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

- `x16-hello [firstprg|hellochar|helloworld|printnts]` runs one of the
  basic demos. `firstprg` prints nothing and exits with status 0,
  `hellochar` prints a single `x`, `helloworld` (the default) prints
  `Hello, World!` and a newline, and `printnts` prints `Hello, World!`
  without a newline.
- `x16-screen [setscreen|colorblocks]` uses 24-bit ANSI colour escapes.
  `setscreen` clears the screen to red with black text; `colorblocks`
  (the default) clears the screen to blue and draws a row of sixteen
  coloured blocks, one per palette entry.
- `x16-menu` shows a menu; type `1` to say hello, `2` to say goodbye,
  `3` to quit. Every character read counts as a selection, including the
  newline after a key, and the menu is shown again after each one. It
  stops when `3` is read or the input ends.
- `x16-numberguess` picks a number between 1 and 10 and tells you whether
  each guess is too high or too low. The time you take to press Enter
  seeds the random number. After each round answer `y` or `Y` to play
  again; at the end it reports your lowest number of guesses. If the
  input ends or a guess is not a number, it stops with exit status 1.

## Using the modules

Each demo is also a function that writes to any text stream, which makes
it easy to drive from code or tests:

    import io
    from x16demos.basics import hello_world, print_string
    from x16demos.menu import run_menu
    from x16demos.numberguess import judge_guess, secret_number, GuessResult

    out = io.StringIO()
    hello_world(out)
    print_string("Hello, World!", out)   # stops at the first "\0"

    run_menu(io.StringIO("13"), out)     # True: the user chose quit

    judge_guess(3, 7)                    # GuessResult.LOW
    secret_number(42)                    # same number for the same seed

`x16demos.numberguess.play(inp, out, clock)` runs the whole game on the
given streams and returns the best score; `clock` is any callable
returning an integer time, so a test can make the secret number fixed.

`x16demos.screen` offers a `Console` with `textcolor`, `bgcolor`,
`clrscr` and `write`, plus the sixteen-entry `Color` palette (each member
has an `rgb` property). `textcolor` and `bgcolor` return the previous
colour. `set_screen`, `print_block`, `restore_colors` and `color_blocks`
use a `Console` to colour the screen.

## What it does not do

The screen demos only write ANSI escape sequences: they do not change the
terminal's size, text mode or border colour, and the colours show only on
a terminal that understands 24-bit colour escapes.