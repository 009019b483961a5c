"""
Quote Pipeline Module

Ties the components together for one run:

1. Cache lookup → `<cache_directory>/<subtitle name>.<word|char>`
2. Cache hit → load the transition dictionary, the subtitle is not read
3. Cache miss → read subtitle, tokenize, build, save to cache
4. Sampling → random walk from a capitalized token

Usage:
    config = QuoteConfig(subtitle_path="heat.srt", cache_directory="/tmp/subquote")
    quote = get_quote(config)
"""

import logging
from typing import Optional

from .cache import load_transitions, save_transitions
from .config import QuoteConfig
from .sampler import IntegerSource, generate_quote, make_rng
from .transitions import TransitionDictionary, build_from_file

logger = logging.getLogger(__name__)


def load_or_build(config: QuoteConfig) -> TransitionDictionary:
    """
    Return the transition dictionary for the configured subtitle and unit.

    Args:
        config: Validated run configuration

    Returns:
        The cached dictionary on a cache hit, otherwise a freshly built one
        that has also been written to the cache
    """
    path = config.cache_path
    if path.is_file():
        logger.info(f"Cache hit: {path}")
        return load_transitions(path)

    logger.info(f"Cache miss: building {config.unit} transitions from {config.subtitle_path}")
    transitions = build_from_file(config.subtitle_path, config.unit)
    save_transitions(transitions, path)
    return transitions


def get_quote(config: QuoteConfig, rng: Optional[IntegerSource] = None) -> str:
    """
    Produce one quote for `config`.

    Args:
        config: Validated run configuration
        rng: Integer source; seeded from `config.seed` when omitted

    Returns:
        The generated quote

    Raises:
        SubquoteError: any classified failure of loading, building,
            caching or sampling
    """
    transitions = load_or_build(config)
    if rng is None:
        rng = make_rng(config.seed)
    return generate_quote(transitions, config.quote_length, rng)
