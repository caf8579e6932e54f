"""Per-letter hints and the feedback shown after each guess."""

from __future__ import annotations

from enum import IntEnum

_ABSENT_SYMBOL = "\u2b1c\ufe0f"  # grey square
_WRONG_POSITION_SYMBOL = "\U0001f7e1"  # yellow circle
_CORRECT_POSITION_SYMBOL = "\U0001f49a"  # green heart
_UNKNOWN_SYMBOL = "\U0001f494"  # broken heart


class Hint(IntEnum):
    """How a guessed letter relates to the solution."""

    ABSENT_CHARACTER = 0
    WRONG_POSITION = 1
    CORRECT_POSITION = 2

    def __str__(self) -> str:
        return hint_symbol(self)


_SYMBOLS = {
    Hint.ABSENT_CHARACTER: _ABSENT_SYMBOL,
    Hint.WRONG_POSITION: _WRONG_POSITION_SYMBOL,
    Hint.CORRECT_POSITION: _CORRECT_POSITION_SYMBOL,
}


def hint_symbol(value: int) -> str:
    """Return the symbol for a hint value; unknown values get a broken heart."""
    return _SYMBOLS.get(value, _UNKNOWN_SYMBOL)


class Feedback(list):
    """A list of hints, one per character of the word."""

    def __str__(self) -> str:
        return "".join(hint_symbol(value) for value in self)

    def string_concat(self) -> str:
        """Build the same text as ``str()`` by repeated concatenation."""
        output = ""
        for value in self:
            output += hint_symbol(value)
        return output