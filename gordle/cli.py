"""Command line entry point for playing gordle."""

from __future__ import annotations

import argparse
import sys

from gordle.corpus import CorpusError, read_corpus
from gordle.game import Game

MAX_ATTEMPTS = 6
CORPUS_FILE = "./gordle/corpus/english.txt"


def main(argv: list[str] | None = None) -> int:
    """Play a game of gordle on standard input and output."""
    parser = argparse.ArgumentParser(prog="gordle", description="Guess the word.")
    parser.add_argument("corpus", nargs="?", default=CORPUS_FILE, help="word list file")
    parser.add_argument(
        "--max-attempts", type=int, default=MAX_ATTEMPTS, help="number of guesses allowed"
    )
    args = parser.parse_args(argv)

    try:
        corpus = read_corpus(args.corpus)
    except CorpusError as err:
        print(f"unable to read corpus: {err}", file=sys.stderr)
        return 1

    try:
        game = Game(sys.stdin, corpus, args.max_attempts)
    except CorpusError as err:
        print(f"unable to start game: {err}", file=sys.stderr)
        return 1

    try:
        game.play()
    except EOFError as err:
        print(f"Gordle failed to read your guess: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())