import io

import pytest

from gordle.corpus import CorpusIsEmptyError
from gordle.game import (
    Game,
    InvalidWordLengthError,
    compute_feedback,
    split_to_uppercase_characters,
)
from gordle.hint import Feedback, Hint

A = Hint.ABSENT_CHARACTER
W = Hint.WRONG_POSITION
C = Hint.CORRECT_POSITION


@pytest.mark.parametrize(
    "text, want",
    [
        ("HELLO", "HELLO"),
        ("مرحبا", "مرحبا"),
        ("こんにちは", "こんにちは"),
        ("こんに\nこんにちは", "こんにちは"),
    ],
)
def test_game_ask(text, want):
    game = Game(io.StringIO(text), [want], 0)
    assert game.ask() == want


def test_game_ask_reports_invalid(capsys):
    game = Game(io.StringIO("hi\r\nhello\n"), ["hello"], 0)
    assert game.ask() == "HELLO"
    captured = capsys.readouterr()
    assert "Enter a 5-digit character guess:" in captured.out
    assert "Your attempt is invalid with Gordle's solution" in captured.err


def test_game_ask_end_of_input():
    game = Game(io.StringIO("abc\n"), ["hello"], 0)
    with pytest.raises(EOFError):
        game.ask()


@pytest.mark.parametrize(
    "word, valid",
    [
        ("GUESS", True),
        ("HI", False),
        ("SHOULDFAIL", False),
        ("", False),
        ([], False),
        (None, False),
    ],
)
def test_game_validate_guess(word, valid):
    game = Game(None, ["XXXXX"], 0)
    if valid:
        assert game.validate_guess(word) is None
    else:
        with pytest.raises(InvalidWordLengthError) as info:
            game.validate_guess(word)
        assert "doesn't have the same number of characters" in str(info.value)
        assert info.value.expected == 5


def test_validate_guess_message():
    game = Game(None, ["XXXXX"], 0)
    with pytest.raises(InvalidWordLengthError) as info:
        game.validate_guess("HI")
    assert str(info.value).startswith("expected 5, got 2, ")


def test_new_game_empty_corpus():
    with pytest.raises(CorpusIsEmptyError):
        Game(None, [], 6)


def test_new_game_uppercases_solution():
    assert Game(None, ["hello"], 6).solution == "HELLO"


@pytest.mark.parametrize(
    "word, want",
    [
        ("lower", ["L", "O", "W", "E", "R"]),
        ("Title", ["T", "I", "T", "L", "E"]),
        ("mIxEd", ["M", "I", "X", "E", "D"]),
        ("CAPITALS", ["C", "A", "P", "I", "T", "A", "L", "S"]),
    ],
)
def test_split_to_uppercase_characters(word, want):
    assert split_to_uppercase_characters(word) == want


@pytest.mark.parametrize(
    "guess, solution, want",
    [
        ("hello", "hello", [C, C, C, C, C]),
        ("hlllo", "hello", [C, A, C, C, C]),
        ("shall", "hello", [A, W, A, C, W]),
        ("hleol", "hello", [C, W, W, W, W]),
        ("lloeh", "hello", [W, W, W, W, W]),
        ("xxxxx", "hello", [A, A, A, A, A]),
        ("", "", []),
    ],
)
def test_compute_feedback(guess, solution, want):
    assert compute_feedback(guess, solution) == Feedback(want)


def test_compute_feedback_length_mismatch(capsys):
    result = compute_feedback("abc", "hello")
    assert result == Feedback([A, A, A])
    assert "Internal error!" in capsys.readouterr().err


def test_play_win(capsys):
    game = Game(io.StringIO("world\nhello\n"), ["hello"], 6)
    assert game.play() is True
    out = capsys.readouterr().out
    assert out.startswith("Welcome to Gordle!")
    assert "found it in 2 guess(es)! The word was: HELLO" in out


def test_play_lose(capsys):
    game = Game(io.StringIO("xxxxx\nxxxxx\n"), ["hello"], 2)
    assert game.play() is False
    out = capsys.readouterr().out
    assert "You've lost! The solution was: HELLO." in out
    assert out.count("⬜️⬜️⬜️⬜️⬜️") == 2