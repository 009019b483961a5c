"""
Cache Store

Persists transition dictionaries as JSON so later runs on the same subtitle
file and unit skip parsing. The document layout is

    {"entries": [{"key": "Hello", "pairs": ["world", "there"]}, ...]}

Entry order follows the dictionary's own iteration order and carries no
meaning. The cache is never checked against the source file: once written
it is used as is.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .errors import CacheCorrupt, CacheUnreadable, CacheUnwritable
from .tokenization import Unit
from .transitions import TransitionDictionary

logger = logging.getLogger(__name__)


def cache_path(cache_directory: str | Path, subtitle_path: str | Path, unit: Unit) -> Path:
    """`<cache_directory>/<subtitle name>` with its extension swapped for the unit's.

    `movies/heat.srt` with `Unit.WORD` maps to `<cache_directory>/heat.word`.
    """

    return (Path(cache_directory) / Path(subtitle_path).name).with_suffix(f".{unit.extension}")


@dataclass(frozen=True)
class CacheEntry:
    key: str
    pairs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {"key": self.key, "pairs": list(self.pairs)}

    @classmethod
    def from_dict(cls, record) -> "CacheEntry":
        if not isinstance(record, dict):
            raise CacheCorrupt(f"cache entry is not an object: {record!r}")
        key = record.get("key")
        pairs = record.get("pairs")
        if not isinstance(key, str):
            raise CacheCorrupt(f"cache entry has no string 'key': {record!r}")
        if not isinstance(pairs, list) or not all(isinstance(p, str) for p in pairs):
            raise CacheCorrupt(f"cache entry {key!r} has no string list 'pairs'")
        return cls(key=key, pairs=list(pairs))


def to_entries(transitions: TransitionDictionary) -> List[CacheEntry]:
    """Snapshot a dictionary as cache entries without modifying it."""
    return [CacheEntry(key=key, pairs=list(pairs)) for key, pairs in transitions.items()]


def from_entries(entries: List[CacheEntry]) -> TransitionDictionary:
    transitions: TransitionDictionary = {}
    for entry in entries:
        # Last entry wins on duplicate keys.
        transitions[entry.key] = list(entry.pairs)
    return transitions


def load_transitions(path: str | Path) -> TransitionDictionary:
    """
    Load a cached transition dictionary.

    Raises:
        CacheUnreadable: the file cannot be opened
        CacheCorrupt: the contents are not a valid cache document
    """

    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise CacheUnreadable(f"couldn't open cached file {path}: {e}") from e

    with f:
        try:
            document = json.load(f)
        except (ValueError, RecursionError, OSError) as e:
            raise CacheCorrupt(f"couldn't deserialize cached file {path}: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get("entries"), list):
        raise CacheCorrupt(f"couldn't deserialize cached file {path}: missing 'entries' list")

    transitions = from_entries([CacheEntry.from_dict(r) for r in document["entries"]])
    logger.info(f"Loaded {len(transitions)} cached transitions from {path}")
    return transitions


def save_transitions(transitions: TransitionDictionary, path: str | Path) -> None:
    """
    Write `transitions` to `path`, creating or truncating the file.

    The dictionary is only read, so the caller can keep sampling from it.

    Raises:
        CacheUnwritable: the file cannot be created or written
    """

    document = {"entries": [entry.to_dict() for entry in to_entries(transitions)]}

    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise CacheUnwritable(f"couldn't create cache file {path}: {e}") from e

    try:
        with f:
            json.dump(document, f, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, OSError) as e:
        raise CacheUnwritable(f"couldn't write to cache file {path}: {e}") from e

    logger.info(f"Saved {len(document['entries'])} transitions to {path}")
