"""Guess-the-number console game."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import Iterator, Protocol, TextIO

LOWEST = 1
HIGHEST = 100


class Difficulty(Enum):
    """Menu choice for a level, with the number of guesses it allows."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def attempts(self) -> int:
        return _ATTEMPTS[self]


_ATTEMPTS = {Difficulty.EASY: 10, Difficulty.MEDIUM: 7, Difficulty.HARD: 5}


class Verdict(Enum):
    """Outcome of a single guess."""

    CORRECT = "correct"
    TOO_HIGH = "too high"
    TOO_LOW = "too low"


def judge(guess: int, secret: int) -> Verdict:
    """Compare a guess with the secret number."""
    if guess == secret:
        return Verdict.CORRECT
    return Verdict.TOO_HIGH if guess > secret else Verdict.TOO_LOW


class GuessingGame:
    """One round: a secret number and a limited number of guesses."""

    def __init__(self, difficulty: Difficulty, secret: int) -> None:
        self.difficulty = difficulty
        self.secret = secret
        self.attempts_left = difficulty.attempts
        self.won = False

    @property
    def over(self) -> bool:
        return self.won or self.attempts_left == 0

    def guess(self, number: int) -> Verdict:
        """Spend one guess and report how it compares with the secret."""
        if self.over:
            raise RuntimeError("the game is over")
        verdict = judge(number, self.secret)
        if verdict is Verdict.CORRECT:
            self.won = True
        else:
            self.attempts_left -= 1
        return verdict


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


_MENU = (
    "\nEnter the difficulty level: \n"
    "1 for easy!\n"
    "2 for medium!\n"
    "3 for difficult!\n"
    "0 for ending the game!\n\n"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _parse_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _play_round(game: GuessingGame, tokens: Iterator[str], write) -> bool:
    """Run one round; return False if the input ran out."""
    write(
        f"\nYou have {game.attempts_left} choices for finding the "
        f"secret number between {LOWEST} and {HIGHEST}."
    )
    while not game.over:
        write("\n\nEnter the number : ")
        token = next(tokens, None)
        if token is None:
            return False
        number = _parse_int(token)
        if number is None:
            write(f"{token} is not a whole number\n")
            continue
        verdict = game.guess(number)
        if verdict is Verdict.CORRECT:
            write(f"Well played! You won, {number} is the secret number\n")
            write("\t\t\t Thanks for playing...\n")
            break
        write(f"Nope, {number} is not the right number\n")
        if verdict is Verdict.TOO_HIGH:
            write("The secret number is smaller than the number you have chosen\n")
        else:
            write("The secret number is greater than the number you have chosen\n")
        write(f"{game.attempts_left} choice left. ")
        if game.attempts_left == 0:
            write(
                f"\n\nYou couldn't find the secret number, it was "
                f"{game.secret}, You lose!! \n\n"
            )
    return True


def play(stream_in: TextIO, stream_out: TextIO, rng: _RandomSource | None = None) -> None:
    """Run the interactive game until the player picks 0 or input ends."""
    rng = rng if rng is not None else random.Random()
    write = stream_out.write
    tokens = _tokens(stream_in)

    write("\n\t\t\t Welcome to GuessTheNumber GAME!\n")
    write(
        f"You have to guess a number between {LOWEST} and {HIGHEST}. "
        "You'll have limited choices based on the level you choose. Good Luck!\n"
    )
    while True:
        write(_MENU)
        write("Enter the number : ")
        token = next(tokens, None)
        if token is None:
            return
        choice = _parse_int(token)
        if choice == 0:
            return
        try:
            difficulty = Difficulty(choice)
        except ValueError:
            write("Wrong choice, Enter valid choice to play the game! (0,1,2,3)")
            continue
        game = GuessingGame(difficulty, rng.randint(LOWEST, HIGHEST))
        if not _play_round(game, tokens, write):
            return


def main(argv: list[str] | None = None) -> int:
    """Start the game on the console."""
    play(sys.stdin, sys.stdout, random.Random())
    return 0


if __name__ == "__main__":
    sys.exit(main())