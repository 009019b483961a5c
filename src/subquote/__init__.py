"""Random quotes from SubRip subtitles.

Builds a token-to-successors dictionary from a subtitle file, caches it,
and walks it at random to produce a short quote.
"""

from .config import QuoteConfig
from .errors import (
    CacheCorrupt,
    CacheUnreadable,
    CacheUnwritable,
    EmptyCorpus,
    NoSampleableSuccessor,
    SourceUnreadable,
    SubquoteError,
)
from .pipeline import get_quote
from .tokenization import Unit, tokenize_line

__version__ = "0.1.0"

__all__ = [
    "QuoteConfig",
    "Unit",
    "get_quote",
    "tokenize_line",
    "SubquoteError",
    "SourceUnreadable",
    "CacheUnreadable",
    "CacheCorrupt",
    "CacheUnwritable",
    "EmptyCorpus",
    "NoSampleableSuccessor",
]
