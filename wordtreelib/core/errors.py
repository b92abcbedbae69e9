"""Exceptions raised by the WordTreeLib core.

All failures in the core are local and synchronous. Duplicate insertion and
removal from an empty tree are NOT errors - they are reported through return
values (``False`` and ``None`` respectively).
"""


class TreeError(Exception):
    """Base class for all errors raised by WordTreeLib."""
    pass


class NullArgumentError(TreeError, ValueError):
    """Raised when ``None`` is passed where a value is required."""
    pass


class EmptyTreeError(TreeError, LookupError):
    """Raised when the root is requested from an empty tree."""
    pass


class IteratorExhaustedError(TreeError, LookupError):
    """Raised when ``next()`` is called on an iterator with no elements left."""
    pass
