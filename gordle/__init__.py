"""A terminal word-guessing game: word lists, hints, the game loop and its command."""

__version__ = "0.1.0"
__all__ = ["cli", "corpus", "game", "hint"]