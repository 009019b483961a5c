#!/usr/bin/env python3
"""
subquote command line

Prints a random quote built from the word (or character) successions of a
SubRip subtitle file. Processed subtitles are cached so later runs on the
same file skip parsing.

Usage:
    subquote movie.srt                      # 5 word quote
    subquote movie.srt -u char              # 25 step quote, char cache
    subquote movie.srt -l 12 --cache ./c    # explicit length and cache
    subquote movie.srt --config run.json    # settings from a JSON file
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .config import QuoteConfig, default_quote_length
from .errors import SubquoteError
from .pipeline import get_quote
from .tokenization import Unit

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Arguments that parsed but cannot form a valid configuration."""


def default_cache_directory() -> Optional[str]:
    """`$XDG_CACHE_HOME/subquote`, or None when XDG_CACHE_HOME is unset."""
    base = os.environ.get("XDG_CACHE_HOME")
    if not base:
        return None
    return str(Path(base) / "subquote")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subquote",
        description="Generate a random quote from a SubRip subtitle file"
    )

    parser.add_argument(
        "subtitle",
        help="Subtitle file (.srt)"
    )

    parser.add_argument(
        "--length", "-l",
        type=int,
        help=f"Maximum quote length (default: {default_quote_length()} for word, "
             f"{default_quote_length(Unit.GRAPHEME)} for char)"
    )

    parser.add_argument(
        "--unit", "-u",
        choices=["word", "char"],
        help="Unit used to build the quote (default: word)"
    )

    cache_help = "Where to save processed subtitles"
    default_cache = default_cache_directory()
    if default_cache:
        cache_help += f" (default: {default_cache})"
    parser.add_argument(
        "--cache",
        type=str,
        help=cache_help
    )

    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        help="Be verbose"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible quotes"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )

    return parser


def load_config_file(path: str) -> Dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config_dict = json.load(f)
    except (OSError, ValueError) as e:
        raise UsageError(f"couldn't read config file (got \"{path}\"): {e}") from e
    if not isinstance(config_dict, dict):
        raise UsageError(f"config file must hold a JSON object (got \"{path}\")")
    return config_dict


def check_setting_types(settings: Dict) -> None:
    """
    Reject config file values of the wrong JSON type.

    Raises:
        UsageError: a path is not a string, `verbose` is not a boolean or
            `seed` is not an integer
    """
    for name in ("subtitle_path", "cache_directory"):
        if not isinstance(settings.get(name), str):
            raise UsageError(f"{name} must be a string (got {settings.get(name)!r})")
    if not isinstance(settings.get("verbose", False), bool):
        raise UsageError(f"verbose must be true or false (got {settings['verbose']!r})")
    seed = settings.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise UsageError(f"seed must be an integer (got {seed!r})")


def build_config(args: argparse.Namespace) -> Tuple[QuoteConfig, bool]:
    """
    Merge the config file (if any) with explicit flags.

    Explicit flags win over the config file.

    Returns:
        The configuration, and whether the cache directory was given
        explicitly (flag or config file) rather than defaulted

    Raises:
        UsageError: the settings cannot form a configuration
    """
    settings = load_config_file(args.config) if args.config else {}
    settings["subtitle_path"] = args.subtitle
    if args.unit is not None:
        settings["unit"] = args.unit
    if args.length is not None:
        settings["quote_length"] = args.length
    if args.seed is not None:
        settings["seed"] = args.seed
    if args.verbose:
        settings["verbose"] = True

    if args.cache is not None:
        settings["cache_directory"] = args.cache
    cache_provided = "cache_directory" in settings
    if not cache_provided:
        default_cache = default_cache_directory()
        if default_cache is None:
            raise UsageError(
                "couldn't determine user's default cache directory "
                "(provide it with --cache /path/to/cache)"
            )
        settings["cache_directory"] = default_cache

    check_setting_types(settings)
    try:
        config = QuoteConfig.from_dict(settings)
    except (TypeError, ValueError) as e:
        raise UsageError(str(e)) from e
    return config, cache_provided


def validate_config(config: QuoteConfig, cache_provided: bool = True) -> List[str]:
    """
    Check a configuration before the pipeline runs.

    A missing default cache directory is created; an explicitly given one
    must already exist.

    Returns:
        List of problems (empty when the configuration is usable)
    """
    errors = []
    if not isinstance(config.quote_length, int) or config.quote_length < 1:
        errors.append(
            f"quote length must be greater or equal to 1 (got \"{config.quote_length}\")"
        )

    cache_directory = Path(config.cache_directory)
    if not cache_directory.is_dir():
        if cache_provided:
            errors.append(
                f"couldn't read specified cache directory (got \"{config.cache_directory}\")"
            )
        else:
            try:
                cache_directory.mkdir(parents=True)
                logger.info(f"Created default cache directory at {cache_directory}")
            except OSError:
                errors.append(
                    f"couldn't create cache directory (got \"{config.cache_directory}\")"
                )

    if not Path(config.subtitle_path).is_file():
        errors.append(f"specified subtitle is not a file (got \"{config.subtitle_path}\")")
    return errors


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config, cache_provided = build_config(args)
        configure_logging(config.verbose)
        errors = validate_config(config, cache_provided)
        if errors:
            raise UsageError("; ".join(errors))
        quote = get_quote(config)
    except (UsageError, SubquoteError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(quote)
    return 0


if __name__ == "__main__":
    sys.exit(main())
