"""Error kinds raised by the quote pipeline.

Every failure of the core surfaces as a `SubquoteError` subclass; only the
command line decides how the process exits.
"""


class SubquoteError(Exception):
    """Base class for all pipeline failures."""


class SourceUnreadable(SubquoteError):
    """The subtitle file could not be opened or decoded."""


class CacheUnreadable(SubquoteError):
    """A cache file exists but could not be opened."""


class CacheCorrupt(SubquoteError):
    """A cache file is not a valid transition document."""


class CacheUnwritable(SubquoteError):
    """The cache file could not be created or written."""


class EmptyCorpus(SubquoteError):
    """No capitalized token is available to start a quote."""


class NoSampleableSuccessor(SubquoteError):
    """A random draw was requested from an empty candidate list."""
