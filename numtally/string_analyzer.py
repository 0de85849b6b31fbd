"""Character statistics and reversals of a line of text."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

CAPS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
NOT_CAPS = frozenset("abcdefghijklmnopqrstuvwxyz")
VOWELS = frozenset("AEIOUYaeiouy")
CONSONANTS = frozenset("BCDFGHJKLMNPQRSTVWXYZbcdfghjklmnpqrstvwxyz")
SYMBOLS = frozenset("-=[];'./,!@#$%^&*()+{}|:<>?\"")

# Position at which the reversal scan also copies the tail of the line.
_TAIL_START = ord(" ")


@dataclass(frozen=True)
class CharacterCounts:
    """How many characters of each kind a line holds."""

    spaces: int = 0
    vowels: int = 0
    consonants: int = 0
    symbols: int = 0
    caps: int = 0
    not_caps: int = 0


def count_characters(line: str) -> CharacterCounts:
    """Count spaces, vowels, consonants, symbols, capitals and lower-case letters.

    'Y' and 'y' count both as vowels and as consonants.
    """
    return CharacterCounts(
        spaces=line.count(" "),
        vowels=sum(char in VOWELS for char in line),
        consonants=sum(char in CONSONANTS for char in line),
        symbols=sum(char in SYMBOLS for char in line),
        caps=sum(char in CAPS for char in line),
        not_caps=sum(char in NOT_CAPS for char in line),
    )


def reverse_string(line: str) -> str:
    """Return the line with its characters in reverse order."""
    return line[::-1]


def reverse_words(line: str) -> str:
    """Return the line preceded by its tail from position 32 onward.

    This is what the analyzer's word-reversal step produces: a line shorter
    than 32 characters comes back unchanged.
    """
    tail = line[_TAIL_START:] if len(line) >= _TAIL_START else ""
    return tail + line


def report(line: str) -> str:
    """Return the printed analysis of the line."""
    counts = count_characters(line)
    return (
        f"Length: {len(line)}\n"
        f"Spaces: {counts.spaces}\n"
        f"Vowels: {counts.vowels}\n"
        f"Consonants: {counts.consonants}\n"
        f"Symbols: {counts.symbols}\n"
        f"Caps: {counts.caps}\n"
        f"Not caps: {counts.not_caps}\n"
        f"\nReverse string: {reverse_string(line)}\n"
        f"Reverse words: {reverse_words(line)}\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a line from standard input and print its analysis."""
    print("Welcome to Simple string array!")
    print()
    try:
        line = input("Enter message [ENG]: ")
    except EOFError:
        line = ""
    print(report(line), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())