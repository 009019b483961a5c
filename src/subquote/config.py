"""
Configuration Module for subquote

Holds the validated settings the quote pipeline runs with. Values are
produced by the command line (or a JSON config file) and are not
re-checked here; the pipeline never reads the environment itself.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from .cache import cache_path
from .tokenization import Unit


DEFAULT_UNIT = Unit.WORD

# Default maximum quote length per unit
DEFAULT_QUOTE_LENGTHS: Dict[Unit, int] = {
    Unit.WORD: 5,
    Unit.GRAPHEME: 25,
}


def default_quote_length(unit: Optional[Unit] = None) -> int:
    """Default quote length for `unit` (the default unit when omitted)."""
    return DEFAULT_QUOTE_LENGTHS[unit or DEFAULT_UNIT]


def parse_unit(value: Union[str, Unit]) -> Unit:
    """Accept a `Unit` or its command line spelling (`word` / `char`)."""
    if isinstance(value, Unit):
        return value
    try:
        return Unit(value)
    except ValueError:
        raise ValueError(f"unknown unit {value!r} (expected 'word' or 'char')") from None


@dataclass
class QuoteConfig:
    """
    Settings for one quote generation run.

    Attributes:
        subtitle_path: Path to the SubRip source file
        quote_length: Maximum number of successor steps in the walk
            (defaults per unit when left as None)
        unit: Tokenization unit, also selects the cache file extension
        cache_directory: Directory holding cached transition dictionaries
        verbose: Report cache activity
        seed: Seed for the random generator (None for a fresh one each run)
    """

    subtitle_path: str
    quote_length: Optional[int] = None
    unit: Unit = DEFAULT_UNIT
    cache_directory: str = "."
    verbose: bool = False
    seed: Optional[int] = None

    def __post_init__(self):
        """Normalize the unit and fill in the per-unit default length."""
        self.unit = parse_unit(self.unit)
        if self.quote_length is None:
            self.quote_length = default_quote_length(self.unit)

    @property
    def cache_path(self) -> Path:
        """Cache file for this source and unit."""
        return cache_path(self.cache_directory, self.subtitle_path, self.unit)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'QuoteConfig':
        """Create QuoteConfig instance from dictionary."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def to_dict(self) -> Dict:
        """Convert QuoteConfig to dictionary."""
        return {
            'subtitle_path': self.subtitle_path,
            'quote_length': self.quote_length,
            'unit': self.unit.value,
            'cache_directory': self.cache_directory,
            'verbose': self.verbose,
            'seed': self.seed,
        }
