# gordle

gordle is a word-guessing game for the terminal. The game picks a secret word
from a word list. You have a limited number of attempts to guess it.

## Installing

    pip install .

## Playing

    gordle words.txt

The word list is a plain text file of words separated by spaces or newlines.
If you give no path, the game looks for `./gordle/corpus/english.txt` relative
to the current directory. The game reads guesses from standard input, one per
line.

Options:

- `corpus`: the path to the word list. This argument is optional.
- `--max-attempts N`: the number of guesses allowed. The default is 6.

A guess must have the same number of characters as the hidden word. Case does
not matter, and characters from any script work. When a guess has the wrong
length, the game prints the reason to standard error and reads the next line.
After each valid guess it prints one symbol per character:

- 💚 the character is in the right place
- 🟡 the character is in the word but in another place
- ⬜️ the character is not in the word, or every occurrence of it is already
  accounted for

If you find the word, the game tells you how many guesses it took. If you do
not, it reveals the solution.

The command exits with status 0 when a game is played to the end. It exits
with status 1 in these cases:

- the word list cannot be read
- the word list is empty
- input ends before a valid guess is made

## Using it as a library

```python
import io

from gordle.corpus import read_corpus, pick_word
from gordle.game import Game, compute_feedback

words = read_corpus("words.txt")   # CorpusError if unreadable, CorpusIsEmptyError if empty
game = Game(io.StringIO("hello\n"), ["hello"], 6)
won = game.play()                  # True: the guess matches

print(compute_feedback(list("SHALL"), list("HELLO")))   # ⬜️🟡⬜️💚🟡
```

The modules:

- `gordle.corpus`
  - `read_corpus(path)` returns the words in a file.
  - `pick_word(corpus)` returns a random word from a list.
  - `CorpusError` and `CorpusIsEmptyError` are the errors these functions raise.
- `gordle.game`
  - `Game(reader, corpus, max_attempts)` holds one game. Its methods:
    - `play()` runs the game.
    - `ask()` reads lines until a guess of the right length arrives. It raises `EOFError` if input runs out.
    - `validate_guess(guess)` raises `InvalidWordLengthError` when the guess has the wrong length.
  - `compute_feedback(guess, solution)` returns a `Feedback`.
  - `split_to_uppercase_characters(text)` returns the characters of `text` in upper case.
- `gordle.hint`
  - `Hint` is the enum `ABSENT_CHARACTER`, `WRONG_POSITION`, `CORRECT_POSITION`.
  - `Feedback` is a list of hints. `str()` on it gives the row of symbols, and `string_concat()` gives the same text.
  - `hint_symbol(value)` gives the symbol for one hint. A value it does not know gets 💔.

## What it does not do

- The package includes no word list. You must supply one.
- A guess is only checked for length, not against the word list. Any string of
  the right length counts as an attempt.

## Running the tests

    pip install .[test]
    pytest