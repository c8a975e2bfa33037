"""Exception types raised by the nodechain containers.

Each error also derives from the built-in exception normally raised for the
same condition (``ValueError`` for bad arguments, ``IndexError`` for reads
from an empty container), so callers can catch either.
"""


class NodechainError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(NodechainError, ValueError):
    """A required handle or data value is missing or of the wrong kind."""


class EmptyCollectionError(NodechainError, IndexError):
    """An operation that needs at least one node was called on an empty list."""
