import logging

from .datastructures import LinkedList, Node
from .errors import EmptyCollectionError, InvalidArgumentError, NodechainError

# Library default: no output unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LinkedList",
    "Node",
    "NodechainError",
    "InvalidArgumentError",
    "EmptyCollectionError",
]
