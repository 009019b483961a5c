"""
Transition Dictionary Builder

Folds the tokens of a subtitle file into a mapping from each token to the
tokens seen right after it. Successor lists keep duplicates, so a token
observed N times after a key appears N times in its list and is sampled
proportionally later on.

Adjacency never crosses a line boundary: every surviving line is
tokenized and paired on its own.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from .errors import SourceUnreadable
from .text_cleaning import split_lines
from .tokenization import Unit, successor_pairs, tokenize_line

logger = logging.getLogger(__name__)

TransitionDictionary = Dict[str, List[str]]


def add_pair(transitions: TransitionDictionary, current: str, nxt: str) -> None:
    """Record that `nxt` followed `current`.

    A token ending with a period is never inserted as a new key, but a key
    that already exists keeps collecting successors whatever it ends with.
    """

    successors = transitions.get(current)
    if successors is not None:
        successors.append(nxt)
    elif not current.endswith("."):
        transitions[current] = [nxt]


def build_transitions(lines: Iterable[str], unit: Unit = Unit.WORD) -> TransitionDictionary:
    transitions: TransitionDictionary = {}
    for line in lines:
        for current, nxt in successor_pairs(tokenize_line(line, unit)):
            add_pair(transitions, current, nxt)
    return transitions


def read_subtitle(path: str | Path) -> str:
    """Read a subtitle file as UTF-8, dropping a leading byte order mark."""

    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(f"couldn't open subtitle file {path}: {e}") from e


def build_from_file(path: str | Path, unit: Unit = Unit.WORD) -> TransitionDictionary:
    transitions = build_transitions(split_lines(read_subtitle(path)), unit)
    logger.info(
        f"Built {len(transitions)} transitions from {path} "
        f"({sum(len(v) for v in transitions.values())} successor observations)"
    )
    return transitions
