"""
Quote Sampler

Random walk over a transition dictionary. The walk starts from a key whose
first character is uppercase and follows randomly chosen successors until
either `quote_length` steps were taken or the current token has nothing
recorded after it, so a quote holds between 1 and `quote_length + 1`
tokens.

Randomness comes from an injected generator exposing
`integers(low, high)`, the `numpy.random.Generator` method, so tests can
substitute a fixed sequence.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Protocol, Sequence

import numpy as np
import regex  # type: ignore

from .errors import EmptyCorpus, NoSampleableSuccessor
from .transitions import TransitionDictionary

logger = logging.getLogger(__name__)


_UPPERCASE_START_RE = regex.compile(r"^\p{Uppercase}")
_PUNCTUATED_RE = re.compile(r".+[.,!?]\Z", re.DOTALL)


class IntegerSource(Protocol):
    def integers(self, low: int, high: int) -> int:
        """Uniform integer in `[low, high)`."""


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def choose(rng: IntegerSource, candidates: Sequence[str]) -> str:
    """Pick one candidate uniformly; never draws from an empty sequence."""

    if not candidates:
        raise NoSampleableSuccessor("no candidates to sample from")
    return candidates[int(rng.integers(0, len(candidates)))]


def start_tokens(transitions: TransitionDictionary) -> list[str]:
    return [key for key in transitions if _UPPERCASE_START_RE.match(key)]


def walk(
    transitions: TransitionDictionary,
    start: str,
    quote_length: int,
    rng: IntegerSource,
) -> list[str]:
    tokens = []
    current = start
    remaining = quote_length
    while remaining > 0:
        successors = transitions.get(current)
        if successors is None:
            logger.debug(f"Walk stopped at {current!r}: no recorded successors")
            break
        try:
            nxt = choose(rng, successors)
        except NoSampleableSuccessor:
            logger.debug(f"Walk stopped at {current!r}: empty successor list")
            break
        tokens.append(current)
        current = nxt
        remaining -= 1
    tokens.append(current)
    return tokens


def finish_quote(tokens: Sequence[str]) -> str:
    """Join tokens with spaces, closing with a period unless already punctuated."""

    quote = " ".join(tokens)
    if not _PUNCTUATED_RE.match(quote):
        quote += "."
    return quote


def generate_quote(
    transitions: TransitionDictionary,
    quote_length: int,
    rng: Optional[IntegerSource] = None,
) -> str:
    """
    Generate one quote from `transitions`.

    Args:
        transitions: Transition dictionary to walk
        quote_length: Maximum number of successor steps (>= 0)
        rng: Integer source; a fresh numpy generator when omitted

    Returns:
        The quote text, always ending with `.`, `,`, `!` or `?`

    Raises:
        EmptyCorpus: no key starts with an uppercase character
    """

    if quote_length < 0:
        raise ValueError("quote_length must be >= 0")
    rng = rng if rng is not None else make_rng()

    starts = start_tokens(transitions)
    if not starts:
        raise EmptyCorpus("couldn't determine the quote starting point")

    tokens = walk(transitions, choose(rng, starts), quote_length, rng)
    return finish_quote(tokens)
