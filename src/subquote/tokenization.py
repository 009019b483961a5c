from __future__ import annotations

from enum import Enum
from typing import Iterable

from .text_cleaning import clean_line, is_noise_line


class Unit(Enum):
    """Tokenization unit. The value is the spelling used on the command line."""

    WORD = "word"
    GRAPHEME = "char"

    @property
    def extension(self) -> str:
        return self.value

    def __str__(self) -> str:
        return "grapheme" if self is Unit.GRAPHEME else "word"


def tokenize_line(line: str, unit: Unit = Unit.WORD) -> list[str]:
    """Tokens of one raw subtitle line; structural lines yield nothing."""

    if is_noise_line(line):
        return []
    # Both units split on whitespace runs; `unit` does not change the result.
    return clean_line(line).split()


def successor_pairs(tokens: Iterable[str]) -> list[tuple[str, str]]:
    toks = list(tokens)
    return [(toks[i], toks[i + 1]) for i in range(0, max(0, len(toks) - 1))]
