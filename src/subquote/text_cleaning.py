from __future__ import annotations

import re


# Timestamp range, bare cue index, or blank line.
_NOISE_RE = re.compile(
    r"(^\d{2}:\d{2}:\d{2},\d{3}\s-->\s\d{2}:\d{2}:\d{2},\d{3}$)|(^\d+$)|(^$)"
)
_MARKUP_RE = re.compile(r'"\s?|<.*>\s?|,|-')


def split_lines(text: str) -> list[str]:
    """Split subtitle text into lines on `\\n`, dropping a trailing `\\r`.

    A final newline does not produce an extra empty line.
    """

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_noise_line(line: str) -> bool:
    return _NOISE_RE.search(line) is not None


def clean_line(line: str) -> str:
    """Strip quotes, tag markup, commas and hyphens from one subtitle line."""

    return _MARKUP_RE.sub("", line)
