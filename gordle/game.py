"""The game loop: reading guesses and scoring them against the solution."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from gordle.corpus import CorpusIsEmptyError, pick_word
from gordle.hint import Feedback, Hint

_INVALID_LENGTH_MESSAGE = (
    "invalid guess, word doesn't have the same number of characters as the solution"
)


class InvalidWordLengthError(ValueError):
    """The guess does not have as many characters as the solution."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"expected {expected}, got {got}, {_INVALID_LENGTH_MESSAGE}")
        self.expected = expected
        self.got = got


class Game:
    """A single game of gordle, reading guesses from a text stream."""

    def __init__(self, reader: TextIO | None, corpus: Sequence[str], max_attempts: int) -> None:
        if not corpus:
            raise CorpusIsEmptyError()
        self.reader = reader
        self.solution = pick_word(corpus).upper()
        self.max_attempts = max_attempts

    def play(self) -> bool:
        """Run the game; return whether the player found the word."""
        print("Welcome to Gordle!")

        for attempt in range(1, self.max_attempts + 1):
            guess = self.ask()
            print(compute_feedback(guess, self.solution))

            if guess == self.solution:
                print(
                    f"🎉 You won! you found it in {attempt} guess(es)! "
                    f"The word was: {self.solution}"
                )
                return True

        print(f"😞 You've lost! The solution was: {self.solution}. ")
        return False

    def ask(self) -> str:
        """Read lines until a guess of valid length is given, and return it."""
        print(f"Enter a {len(self.solution)}-digit character guess:")

        if self.reader is None:
            raise EOFError("no input to read guesses from")

        for line in self.reader:
            guess = "".join(split_to_uppercase_characters(line.rstrip("\r\n")))
            try:
                self.validate_guess(guess)
            except InvalidWordLengthError as err:
                print(
                    f"Your attempt is invalid with Gordle's solution: {err}.",
                    file=sys.stderr,
                )
            else:
                return guess

        raise EOFError("input ended before a valid guess was made")

    def validate_guess(self, guess: Sequence[str] | None) -> None:
        """Raise InvalidWordLengthError unless the guess matches the solution's length."""
        length = len(guess) if guess is not None else 0
        if length != len(self.solution):
            raise InvalidWordLengthError(len(self.solution), length)


def split_to_uppercase_characters(text: str) -> list[str]:
    """Return the characters of ``text`` in upper case."""
    return list(text.upper())


def compute_feedback(guess: Sequence[str], solution: Sequence[str]) -> Feedback:
    """Mark every character of the guess against the solution."""
    result = Feedback(Hint.ABSENT_CHARACTER for _ in guess)

    if len(guess) != len(solution):
        print(
            "Internal error! Guess and solution have different lengths: "
            f"{len(guess)} vs {len(solution)}",
            file=sys.stderr,
        )
        return result

    used = [False] * len(solution)

    for pos, (guessed, expected) in enumerate(zip(guess, solution)):
        if guessed == expected:
            result[pos] = Hint.CORRECT_POSITION
            used[pos] = True

    for pos, guessed in enumerate(guess):
        if result[pos] != Hint.ABSENT_CHARACTER:
            continue
        for sol_pos, expected in enumerate(solution):
            if not used[sol_pos] and guessed == expected:
                result[pos] = Hint.WRONG_POSITION
                used[sol_pos] = True
                break

    return result