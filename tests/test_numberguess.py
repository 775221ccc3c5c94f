import io

import pytest

from x16demos.numberguess import GuessResult, judge_guess, main, play, secret_number


def fixed_clock(*ticks):
    return iter(ticks).__next__


def seed_where(predicate):
    return next(s for s in range(1000) if predicate(secret_number(s)))


def test_judge_guess():
    assert judge_guess(3, 7) is GuessResult.LOW
    assert judge_guess(9, 7) is GuessResult.HIGH
    assert judge_guess(7, 7) is GuessResult.CORRECT


def test_feedback_messages():
    assert judge_guess(1, 5).value == "too low!"
    assert judge_guess(8, 5).value == "too high!"


@pytest.mark.parametrize("seed", range(200))
def test_secret_number_in_range(seed):
    assert 1 <= secret_number(seed) <= 10


def test_secret_number_deterministic():
    first = secret_number(7)
    assert 1 <= first <= 10
    for _ in range(5):
        secret_number(3)
        assert secret_number(7) == first


def test_secret_number_covers_all_values():
    assert {secret_number(s) for s in range(500)} == set(range(1, 11))


def test_first_guess_correct():
    number = secret_number(5)
    out = io.StringIO()
    best = play(io.StringIO(f"\n{number}\nn\n\n"), out, fixed_clock(0, 5))
    assert best == 1
    text = out.getvalue()
    assert "you guessed the number in 1 tries!" in text
    assert "thanks for playing, your lowest number of guesses was 1!" in text
    assert "too low!" not in text and "too high!" not in text


def test_low_then_high_then_correct():
    seed = seed_where(lambda n: 1 < n < 10)
    number = secret_number(seed)
    out = io.StringIO()
    inp = io.StringIO(f"\n{number - 1}\n{number + 1}\n{number}\nn\n\n")
    best = play(inp, out, fixed_clock(100, 100 + seed))
    assert best == 3
    text = out.getvalue()
    assert text.index("too low!") < text.index("too high!")
    assert text.count("guess again: ") == 2


def test_best_is_lowest_over_rounds():
    seed = seed_where(lambda n: n > 1)
    number = secret_number(seed)
    inp = io.StringIO(f"\n1 {number}\nY\n{number}\ny\n1\n{number}\nn\n\n")
    out = io.StringIO()
    best = play(inp, out, fixed_clock(0, seed, 0, seed, 0, seed))
    assert best == 1
    assert out.getvalue().count("congratulations!") == 3


def test_non_numeric_guess_raises():
    with pytest.raises(ValueError):
        play(io.StringIO("\nabc\n"), io.StringIO(), fixed_clock(0, 1))


def test_input_ending_mid_game_raises():
    with pytest.raises(EOFError):
        play(io.StringIO("\n"), io.StringIO(), fixed_clock(0, 1))


def test_main_reports_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "welcome cx16 number guessing game!" in capsys.readouterr().out