"""Small records of a letter and a number, and copying one into another."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass
class LetterNumber:
    """A single character paired with an integer."""

    letter: str = "\0"
    number: int = 0

    def __post_init__(self) -> None:
        if len(self.letter) != 1:
            raise ValueError("letter must be a single character")


@dataclass
class Alpha:
    """Two letter-number records held together."""

    first: LetterNumber = field(default_factory=LetterNumber)
    second: LetterNumber = field(default_factory=LetterNumber)


def merge_two_structs(first: LetterNumber, second: LetterNumber) -> None:
    """Copy the fields of ``second`` into ``first``."""
    first.letter = second.letter
    first.number = second.number


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Merge two sample records and print the results."""
    first = LetterNumber("D", 39)
    second = LetterNumber("M", 40)
    merge_two_structs(first, second)
    print(f"{first.letter}, {first.number}")

    alpha = Alpha()
    alpha.first.letter = "A"
    alpha.second.number = 20
    print(f"{alpha.first.letter}, {alpha.second.number}")
    return 0


if __name__ == "__main__":
    sys.exit(main())