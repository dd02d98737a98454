"""
Exception types shared by the solver, the dataset loaders and the CLIs.

Empty candidate sets are NOT errors: a solver with nothing left simply
recommends nothing.
"""


class SolverError(Exception):
    """Base class for everything the solver raises on purpose."""


class DictionaryUnavailable(SolverError, FileNotFoundError):
    """The word source is missing, unreadable, or holds no usable word."""


class MalformedFeedback(SolverError, ValueError):
    """A (guess, score) pair has the wrong length or invalid characters."""
