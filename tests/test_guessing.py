import io

import pytest

from consolebox.guessing import Difficulty, GuessingGame, Verdict, judge, play


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def _run(text, secret=42):
    out = io.StringIO()
    rng = _FixedRng(secret)
    play(io.StringIO(text), out, rng)
    return out.getvalue(), rng


def test_judge_outcomes():
    assert judge(5, 5) is Verdict.CORRECT
    assert judge(7, 5) is Verdict.TOO_HIGH
    assert judge(3, 5) is Verdict.TOO_LOW


@pytest.mark.parametrize(
    "difficulty, attempts",
    [(Difficulty.EASY, 10), (Difficulty.MEDIUM, 7), (Difficulty.HARD, 5)],
)
def test_game_loses_after_allowed_attempts(difficulty, attempts):
    game = GuessingGame(difficulty, 50)
    assert game.attempts_left == attempts
    for _ in range(attempts):
        assert not game.over
        game.guess(1)
    assert game.over
    assert not game.won
    assert game.attempts_left == 0


def test_correct_guess_wins_without_spending_attempt():
    game = GuessingGame(Difficulty.HARD, 30)
    assert game.guess(40) is Verdict.TOO_HIGH
    assert game.guess(30) is Verdict.CORRECT
    assert game.won
    assert game.over
    assert game.attempts_left == Difficulty.HARD.attempts - 1


def test_guess_after_game_over_raises():
    game = GuessingGame(Difficulty.EASY, 7)
    game.guess(7)
    with pytest.raises(RuntimeError):
        game.guess(7)


def test_menu_choice_selects_difficulty():
    assert Difficulty(1) is Difficulty.EASY
    with pytest.raises(ValueError):
        Difficulty(4)


def test_play_win():
    output, rng = _run("1\n42\n0\n")
    assert "You have 10 choices" in output
    assert "Well played! You won, 42 is the secret number" in output
    assert rng.calls == [(1, 100)]


def test_play_hints():
    output, _ = _run("1\n50\n10\n42\n0\n")
    assert "The secret number is smaller than the number you have chosen" in output
    assert "The secret number is greater than the number you have chosen" in output
    assert "Nope, 50 is not the right number" in output


def test_play_lose():
    output, _ = _run("3\n1 1 1 1 1\n0\n")
    assert "You couldn't find the secret number, it was 42, You lose!!" in output
    assert "Well played" not in output


def test_play_wrong_choice_then_quit():
    output, rng = _run("9\n0\n")
    assert "Wrong choice, Enter valid choice to play the game! (0,1,2,3)" in output
    assert rng.calls == []