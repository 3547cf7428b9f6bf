#!/usr/bin/python
"""This is a simple script to narrow a dictionary down to the Wordle answers
that are still possible, based on the colored-tile feedback received about
previous guesses, and to explain why any given word has been ruled out."""

import argparse  # Used to parse the command-line arguments
import logging  # Used for diagnostic output that shouldn't mix with the results
import os
import shutil  # Used to find out how wide the terminal is
import sys
import textwrap  # Used to pretty-print long blocks of text so that they appear nicely
import typing  # Used for type-checking throughout the script
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Optional, Self, Sequence

from colors import color  # Used to bold and italicise the turn headers
from tqdm import tqdm  # Used to display progress bars for long-running operations

Position = int
Letter = str

log = logging.getLogger(__name__)

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
README_FILENAME = os.path.join(THIS_DIR, "README.md")
DEFAULT_WORDS_FILENAME = "/usr/share/dict/words"

HELP_TEXT = """\
Commands:
  add GUESS CLUE  record a guess (or just 'add', to be asked for each part)
  list            show the words that are still possible
  explain WORD    say why WORD is or isn't still possible
  turns           show the guesses recorded so far
  reset           clear the guesses
  reload          re-read the dictionary file
  h               show this help
  q               quit

Clues are pasted from a Wordle share (🟩 🟨 ⬜ ⬛) or typed as G/Y/B letters.
"""

DEFAULT_TERMINAL_SIZE = (80, 24)  # Used when we can't ask the terminal how big it is

WORD_LENGTH = 5  # The default number of letters in every guess, clue and candidate

ORDINALS = (
    "first", "second", "third", "fourth", "fifth",
    "sixth", "seventh", "eighth", "ninth", "tenth",
)


class WordleOracleError(ValueError):
    """Base class for everything this script raises about bad input."""


class DecodeError(WordleOracleError):
    """Raised when a clue token can't be turned into a sequence of tile colors.
    `symbol`, `position` (the tile index) and `index` (the character index
    within the token) point at the offending symbol; they're None when the
    problem is the number of tiles rather than any particular one."""

    def __init__(
        self,
        message: str,
        symbol: Optional[str] = None,
        position: Optional[Position] = None,
        index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.position = position
        self.index = index


class ValidationError(WordleOracleError):
    """Raised when a guess (or a turn log record) is malformed."""


class TileColor(Enum):
    """The feedback Wordle gives for a single letter of a guess."""

    EXACT = "🟩"  # Green; the letter is in the word, in this position
    PRESENT = "🟨"  # Yellow; the letter is in the word, but not in this position
    ABSENT = "⬜"  # Grey; there are no more occurrences of this letter in the word

    @property
    def glyph(self) -> str:
        return self.value


# Every symbol we accept in a clue token. The letters are the "G/Y/B" shorthand
# that's a lot easier to type into a terminal than emoji are.
CLUE_SYMBOLS: dict[str, TileColor] = {
    "🟩": TileColor.EXACT, "g": TileColor.EXACT, "G": TileColor.EXACT,
    "🟨": TileColor.PRESENT, "y": TileColor.PRESENT, "Y": TileColor.PRESENT,
    "⬜": TileColor.ABSENT, "⬛": TileColor.ABSENT, "b": TileColor.ABSENT, "B": TileColor.ABSENT,
}

# Variation selectors get pasted in along with the emoji (e.g. "⬜️" is really
# "⬜" followed by U+FE0F). They only affect rendering, so they're skipped.
COSMETIC_MODIFIERS = {"\ufe0f", "\ufe0e"}


def ordinal(n: int) -> str:
    """Returns the English ordinal for a 1-based position, e.g. 3 -> "third"."""
    if n < 1:
        raise ValueError(f"Invalid ordinal: {n}")
    if n <= len(ORDINALS):
        return ORDINALS[n - 1]
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def decode_clue(token: str, word_length: int = WORD_LENGTH) -> tuple[TileColor, ...]:
    """This takes a raw clue token, as copied out of a Wordle share or typed in
    as "G/Y/B" letters, and returns one TileColor per tile, in order."""

    tiles: list[TileColor] = []
    previous_was_glyph = False

    for index, symbol in enumerate(token):
        if symbol in COSMETIC_MODIFIERS and previous_was_glyph:
            previous_was_glyph = False  # A glyph only gets one modifier
            continue

        if symbol not in CLUE_SYMBOLS:
            raise DecodeError(
                f"Invalid clue symbol {symbol!r} (U+{ord(symbol):04X}) in clue {token!r} "
                f"(at clue index {len(tiles)}, character index {index})",
                symbol = symbol,
                position = len(tiles),
                index = index,
            )

        tiles.append(CLUE_SYMBOLS[symbol])
        previous_was_glyph = True

    if len(tiles) != word_length:
        raise DecodeError(
            f"Clue {token!r} decodes to {len(tiles)} tiles, but must have {word_length}!"
        )

    return tuple(tiles)


class Turn:
    """A Turn is one guessed word along with the tile colors Wordle gave it.
    Turns are immutable once they've been created."""

    __slots__ = ("_guess", "_clue")

    _guess: str
    _clue: tuple[TileColor, ...]

    def __init__(self, guess: str, clue: Sequence[TileColor]) -> None:
        guess = guess.lower()
        if not (guess.isascii() and guess.isalpha()):
            raise ValidationError(f"Invalid guess {guess!r}: guesses may only contain the letters a-z!")
        if len(clue) != len(guess):
            raise ValidationError(
                f"Invalid clue for guess {guess!r}: got {len(clue)} tiles, "
                f"but the guess has {len(guess)} letters!"
            )

        object.__setattr__(self, "_guess", guess)
        object.__setattr__(self, "_clue", tuple(clue))

    def __setattr__(self, name, value):
        raise AttributeError(f"Turn objects are immutable; can't set {name!r}")

    @property
    def guess(self) -> str:
        return self._guess

    @property
    def clue(self) -> tuple[TileColor, ...]:
        return self._clue

    @property
    def clue_glyphs(self) -> str:
        return "".join(tile.glyph for tile in self._clue)

    @property
    def is_solved(self) -> bool:
        """A Turn whose tiles are all green means the guess was the answer."""
        return all(tile is TileColor.EXACT for tile in self._clue)

    def __str__(self) -> str:
        return f"{self._guess} {self.clue_glyphs}"

    def __repr__(self) -> str:
        return (
            f"<wordle_oracle.Turn at {hex(id(self))}: "
            f"guess: {self._guess}"
            f", clue: {self.clue_glyphs}"
            f">"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Turn):
            return NotImplemented
        return self.__key() == other.__key()

    def __key(self):
        return (self._guess, self._clue)

    def __hash__(self):
        return hash(self.__key())

    @classmethod
    def parse(cls, line: str, word_length: int = WORD_LENGTH) -> Self:
        """This sets up a Turn from one "GUESS CLUE" line of a turn log."""

        match line.split():
            case [guess, clue]:
                pass
            case fields:
                raise ValidationError(
                    f"Invalid turn {line.strip()!r}: expected 'GUESS CLUE', "
                    f"but got {len(fields)} fields"
                )

        if len(guess) != word_length:
            raise ValidationError(
                f"Invalid guess {guess!r}: must be {word_length} letters long, "
                f"but is {len(guess)}"
            )

        return cls(guess, decode_clue(clue, word_length))


class ClueRecord(NamedTuple):
    """One tile of a Turn: where it was, which letter was guessed there,
    and what color Wordle gave it. `position` is 0-based."""

    position: Position
    letter: Letter
    color: TileColor


class OracleAnswer(NamedTuple):
    """The verdict of an Oracle on one candidate word. `reasons` is empty
    when the word is possible, and never empty when it isn't."""

    possible: bool
    reasons: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.possible

    @classmethod
    def from_reasons(cls, reasons: Sequence[str]) -> Self:
        return cls(possible = not reasons, reasons = tuple(reasons))


class Oracle:
    """An Oracle answers one question for one Turn: could `candidate` be the
    answer, given that guessing `turn.guess` produced exactly `turn.clue`?

    Repeated letters are what make this hard. Wordle hands out greens first,
    then yellows from left to right, and only greys a letter once every
    occurrence of it in the answer has already been accounted for. So a grey
    "e" doesn't mean "no e anywhere"; it means "no e beyond the ones the greens
    and yellows already explain".

    To mirror that, each call copies the candidate into an "available pool"
    and lets each green, then each yellow, claim one occurrence of its letter
    from that pool. A grey letter is only a problem if an unclaimed occurrence
    of it is still sitting in the pool at the end."""

    __slots__ = ("_turn", "_records", "_word_length")

    _turn: Turn
    _records: tuple[ClueRecord, ...]
    _word_length: int

    def __init__(self, turn: Turn) -> None:
        object.__setattr__(self, "_turn", turn)
        object.__setattr__(self, "_word_length", len(turn.guess))
        object.__setattr__(self, "_records", tuple(
            ClueRecord(position, letter, tile)
            for position, (letter, tile) in enumerate(zip(turn.guess, turn.clue))
        ))

    def __setattr__(self, name, value):
        raise AttributeError(f"Oracle objects are immutable; can't set {name!r}")

    @property
    def turn(self) -> Turn:
        return self._turn

    @property
    def records(self) -> tuple[ClueRecord, ...]:
        return self._records

    def __repr__(self) -> str:
        return f"<wordle_oracle.Oracle at {hex(id(self))}: turn: {self._turn}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Oracle):
            return NotImplemented
        return self._turn == other._turn

    def __hash__(self):
        return hash(self._turn)

    def _records_for(self, tile: TileColor) -> Iterator[ClueRecord]:
        return (record for record in self._records if record.color is tile)

    def __call__(self, candidate: str) -> OracleAnswer:
        return self.evaluate(candidate)

    def evaluate(self, candidate: str) -> OracleAnswer:
        """This tries to falsify `candidate` against this Oracle's Turn, and
        returns every reason it found (not just the first)."""

        if len(candidate) != self._word_length:
            return OracleAnswer.from_reasons(
                [f'"{candidate}" must be {self._word_length} characters long']
            )

        reasons: list[str] = []

        # Claimed letters get replaced with None, so that each occurrence
        # of a letter in the candidate can only satisfy a single clue.
        pool: list[Optional[Letter]] = list(candidate)

        for position, letter, _ in self._records_for(TileColor.EXACT):
            if candidate[position] != letter:
                reasons.append(
                    f'"{letter}" must be in the {ordinal(position + 1)} position, '
                    f'but found "{candidate[position]}"'
                )
            else:
                pool[position] = None

        for position, letter, _ in self._records_for(TileColor.PRESENT):
            if letter not in candidate:
                reasons.append(f'"{letter}" must be in the word, but isn\'t')
                continue

            # The yellow's own position can never satisfy it.
            slot = next(
                (i for i, pooled in enumerate(pool) if pooled == letter and i != position),
                None,
            )
            if slot is not None:
                pool[slot] = None

            if candidate[position] == letter:
                reasons.append(
                    f'"{letter}" is in the word, but not in the {ordinal(position + 1)} position'
                )
            elif slot is None:
                reasons.append(
                    f'"{letter}" (from {ordinal(position + 1)}) is in the word, '
                    "but has already been claimed by another clue"
                )

        for position, letter, _ in self._records_for(TileColor.ABSENT):
            if letter in pool:
                reasons.append(f'"{letter}" is not in the word')

        return OracleAnswer.from_reasons(reasons)

    def is_possible(self, candidate: str) -> bool:
        return self.evaluate(candidate).possible

    def filter_words(self, words: Iterable[str], show_progress: bool = False) -> "WordList":
        """This applies this Oracle to an entire sequence of candidate words."""
        return WordList([
            word
            for word in tqdm(words, desc = f"Applying {self._turn}", disable = not show_progress, leave = False)
            if self.is_possible(word)
        ])


def build_oracle(turn: Turn) -> Oracle:
    """This builds the Oracle for a single Turn."""
    log.debug("Building oracle for turn %s", turn)
    return Oracle(turn)


class HistoryOracle:
    """A HistoryOracle judges a candidate against a whole game's worth of Turns,
    in the order they were played. The answer is the first impossible answer
    any of the Turns gives, or a possible answer if none of them rule it out."""

    oracles: tuple[Oracle, ...]

    def __init__(self, turns: Iterable[Turn]) -> None:
        self.oracles = tuple(build_oracle(turn) for turn in turns)

    def __repr__(self) -> str:
        return (
            f"<wordle_oracle.HistoryOracle at {hex(id(self))}: "
            f"turns: {[str(o.turn) for o in self.oracles]}"
            f">"
        )

    def __call__(self, candidate: str) -> OracleAnswer:
        for oracle in self.oracles:
            answer = oracle(candidate)
            if not answer.possible:
                return answer
        return OracleAnswer(possible = True)

    def explain(self, candidate: str) -> tuple[Optional[Turn], OracleAnswer]:
        """Like calling the HistoryOracle, but also says which Turn ruled the
        candidate out (None if the candidate is still possible)."""
        for oracle in self.oracles:
            answer = oracle(candidate)
            if not answer.possible:
                return oracle.turn, answer
        return None, OracleAnswer(possible = True)


def build_history_oracle(turns: Iterable[Turn]) -> HistoryOracle:
    return HistoryOracle(turns)


class WordList:
    """A WordList represents the list of candidate words, and provides a number
    of functions to assist in working with them as a group.

    Note that WordLists are named WordLISTS for a reason (as opposed to WordSets):
    they are ordered collections, and x in WordList is O(n)."""

    _words: list[str]

    def __init__(self, words: Iterable[str]) -> None:
        self._words = list(words)

    def __str__(self) -> str:
        return f"WordList containing {len(self)} words"

    def __repr__(self) -> str:
        return (
            f"<wordle_oracle.WordList at {hex(id(self))}: "
            f"_words: {self._words}"
            f">"
        )

    def __bool__(self) -> bool:
        return self._words != []

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WordList):
            return self._words == other._words
        if isinstance(other, list):
            return self._words == other
        return NotImplemented

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        yield from self._words

    @typing.overload
    def __getitem__(self, key: slice) -> Self:
        pass

    @typing.overload
    def __getitem__(self, key: int) -> str:
        pass

    def __getitem__(self, key):
        if isinstance(key, slice):
            return WordList(self._words[key])

        if isinstance(key, int):
            return self._words[key]

        raise TypeError(
            "WordList.__getitem__ expects keys that are integers or slices, "
            f"but got {type(key)} instead!"
        )

    @classmethod
    def from_file(cls, filename: str, word_length: int = WORD_LENGTH) -> Self:
        """This sets up a WordList by reading words from a text file, one per line.
        Anything that isn't a plain a-z word of the right length gets skipped,
        so a full system dictionary can be used as-is."""

        with open(filename, "r", encoding = "utf-8") as infile:
            words = [line.strip().lower() for line in infile]

        # Using dict.fromkeys removes duplicates while preserving the order.
        kept = list(dict.fromkeys(
            word for word in words
            if len(word) == word_length and word.isascii() and word.isalpha()
        ))
        log.debug("Loaded %d %d-letter words (of %d lines) from %s", len(kept), word_length, len(words), filename)
        return cls(kept)

    def copy(self) -> Self:
        """This returns a copy of this WordList."""
        return WordList(self._words[:])

    def columns(self, width: int) -> list[str]:
        """This lays the words out in upper case, separated by single spaces,
        as many to a line as will fit into `width` characters."""
        return textwrap.wrap(
            " ".join(word.upper() for word in self._words),
            width = width,
            break_long_words = False,
            break_on_hyphens = False,
        )

    def pprint(self, width: Optional[int] = None) -> None:
        """This pretty-prints the words for display to the console,
        filling the width of the terminal."""

        if width is None:
            width = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE).columns

        for line in self.columns(width):
            print(line)
        print(f"({len(self)} possible {'word' if len(self) == 1 else 'words'})")


class TurnResult(NamedTuple):
    """What's left of the candidates after playing Turn number `number` (1-based)."""

    number: int
    turn: Turn
    candidates: WordList

    @property
    def solved(self) -> bool:
        return self.turn.is_solved


def run_sequence(
    turns: Iterable[Turn],
    initial_candidates: Iterable[str],
    show_progress: bool = False,
) -> Iterator[TurnResult]:
    """This plays each Turn in order against a shrinking pool of candidates,
    yielding what's left after each one. Each Turn only ever filters what the
    previous Turn left behind, so the pool can only shrink.

    Once a result comes back `solved`, there's nothing left to learn;
    callers should stop iterating at that point."""

    candidates = WordList(initial_candidates)

    for number, turn in enumerate(turns, start = 1):
        candidates = build_oracle(turn).filter_words(candidates, show_progress = show_progress)
        log.debug("After turn #%d (%s): %d candidates remain", number, turn, len(candidates))
        yield TurnResult(number, turn, candidates)


def parse_turn_log(lines: Iterable[str], word_length: int = WORD_LENGTH) -> list[Turn]:
    """This parses the lines of a turn log into Turns. Blank lines are skipped;
    anything else that isn't a valid "GUESS CLUE" record is fatal, since every
    later Turn depends on the earlier ones being right."""

    turns = []
    for line_number, line in enumerate(lines, start = 1):
        if not line.strip():
            continue
        try:
            turns.append(Turn.parse(line, word_length))
        except WordleOracleError as ex:
            ex.add_note(f"in turn log line {line_number}: {line.rstrip()!r}")
            raise
    return turns


def read_turn_log(filename: str, word_length: int = WORD_LENGTH) -> list[Turn]:
    """This reads a turn log from a text file."""
    with open(filename, "r", encoding = "utf-8") as infile:
        turns = parse_turn_log(infile, word_length)
    log.debug("Read %d turns from %s", len(turns), filename)
    return turns


def format_turn_header(result: TurnResult, use_color: bool = True) -> str:
    """This formats the line printed above the candidates left after a Turn.
    The header after the first guess is "Turn #2", since that's the turn
    the remaining candidates are for."""

    title = f"Turn #{result.number + 1}:"
    guess = result.turn.guess.upper()
    if use_color:
        title = color(title, style = "bold")
        guess = color(guess, style = "italic")
    return f'{title} after "{guess}" {result.turn.clue_glyphs}'


def format_explanation(word: str, turn: Optional[Turn], answer: OracleAnswer) -> str:
    """This formats a HistoryOracle.explain result for display."""
    if answer.possible:
        return f"{word.upper()} is still possible."
    return f"{word.upper()} was ruled out by {turn}:\n" + "\n".join(
        f"  - {reason}" for reason in answer.reasons
    )


def print_help() -> None:
    """This prints out some instructional text on how to use the interactive prompt."""
    wrapper = textwrap.TextWrapper(fix_sentence_endings = True, replace_whitespace = False)

    # The README only sits next to the module in a source checkout.
    try:
        with open(README_FILENAME, "r", encoding = "utf-8") as infile:
            lines = infile.readlines()
    except OSError as ex:
        log.debug("Couldn't read %s (%s); using the built-in help", README_FILENAME, ex)
        lines = HELP_TEXT.splitlines()

    print()
    for line in lines:
        print(wrapper.fill(line))
    print()


def solve(
    turns: Sequence[Turn],
    words: WordList,
    width: Optional[int] = None,
    use_color: bool = True,
    show_progress: bool = False,
) -> WordList:
    """This plays a whole turn log, printing the candidates left after each
    Turn, and returns the final set of candidates."""

    candidates = words
    for result in run_sequence(turns, words, show_progress = show_progress):
        print(format_turn_header(result, use_color = use_color))
        result.candidates.pprint(width)
        candidates = result.candidates

        if result.solved:
            print(f"Solved in {result.number} {'guess' if result.number == 1 else 'guesses'}!")
            break

    return candidates


def interactive_prompt(
    words_filename: str = DEFAULT_WORDS_FILENAME,
    word_length: int = WORD_LENGTH,
    width: Optional[int] = None,
    use_color: bool = True,
) -> None:
    """This provides an interactive prompt that helps to make use of this script."""

    words: WordList = WordList.from_file(words_filename, word_length)
    turns: list[Turn] = []

    while True:
        match (command := input("Enter a command ('h' for help, 'q' to quit): ")).lower().split():
            # Exit the script
            case ["quit"] | ["exit"] | ["quit()"] | ["q"]:
                return

            # Print out some help text
            case ["help"] | ["h"] | ["?"]:
                print_help()

            # Reload the word list from the file, in case it's been changed during runtime.
            case ["reload"]:
                try:
                    words = WordList.from_file(words_filename, word_length)
                except OSError as ex:
                    print(f"Couldn't reload the word list; keeping the old one: {ex}")
                    continue
                print("Word list reloaded from file.")

            # Allow the user to view and/or clear the list of current Turns.
            case ["turns"] | ["guesses"]:
                print([str(turn) for turn in turns])
            case ["reset"]:
                turns = []
                print("Guess list cleared.")

            # Allow the user to add a Turn to the current list of Turns.
            case ["add"] | ["add", _, _]:
                if len(args := command.split()) == 3:
                    line = f"{args[1]} {args[2]}"
                else:
                    guess = input("Enter the word you guessed: ")
                    result = input("Enter the result of your guess: ")
                    line = f"{guess} {result}"
                try:
                    turns.append(Turn.parse(line, word_length))
                except WordleOracleError as ex:
                    print(f"Couldn't add that guess: {ex}")

            # Show what's still possible after all of the Turns so far.
            case ["list"] | ["candidates"]:
                if not turns:
                    print("No guesses entered yet; every word is still possible.")
                    continue
                candidates = solve(turns, words, width = width, use_color = use_color)
                if not candidates:
                    print("No words left! Make sure you entered everything correctly.")

            # Explain why a word is, or isn't, still possible.
            case ["explain", word]:
                print(format_explanation(word, *build_history_oracle(turns).explain(word.lower())))

            case _:
                print(f"Unknown command: {command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """The command-line entry point."""

    parser = argparse.ArgumentParser(
        description = "Narrow down the possible Wordle answers from the feedback on your guesses.",
        formatter_class = argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "turn_log", nargs = "?",
        help = "File with one 'GUESS CLUE' line per guess; "
               "if omitted, an interactive prompt starts instead",
    )
    parser.add_argument(
        "--words", default = DEFAULT_WORDS_FILENAME,
        help = "Dictionary file with one word per line",
    )
    parser.add_argument(
        "--word-length", type = int, default = WORD_LENGTH,
        help = "Number of letters in each word",
    )
    parser.add_argument(
        "--width", type = int, default = None,
        help = "Width to lay the candidates out in (default: the terminal width)",
    )
    parser.add_argument(
        "--explain", action = "append", default = [], metavar = "WORD",
        help = "After the last turn, explain why WORD is or isn't possible (may be repeated; turn log only)",
    )
    parser.add_argument(
        "--progress", action = "store_true",
        help = "Show progress bars while filtering (turn log only)",
    )
    parser.add_argument(
        "--no-color", action = "store_true",
        help = "Don't use bold or italic text",
    )
    parser.add_argument(
        "--verbose", "-v", action = "store_true",
        help = "Be verbose",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level = logging.DEBUG if args.verbose else logging.INFO,
        format = "%(asctime)s %(name)s:%(levelname)s: %(message)s",
    )
    use_color = not args.no_color and sys.stdout.isatty()

    if args.turn_log is None:
        if args.explain or args.progress:
            parser.error("--explain and --progress only apply when a turn log is given")
        try:
            interactive_prompt(args.words, args.word_length, width = args.width, use_color = use_color)
        except OSError as ex:
            log.error("%s", ex)
            return 1
        return 0

    try:
        turns = read_turn_log(args.turn_log, args.word_length)
        words = WordList.from_file(args.words, args.word_length)
    except (WordleOracleError, OSError) as ex:
        log.error("%s", ex)
        for note in getattr(ex, "__notes__", []):
            log.error("%s", note)
        return 1

    solve(turns, words, width = args.width, use_color = use_color, show_progress = args.progress)

    history = build_history_oracle(turns)
    for word in args.explain:
        print(format_explanation(word, *history.explain(word.lower())))

    return 0


if __name__ == "__main__":
    sys.exit(main())
