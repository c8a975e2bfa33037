from .linked_list import LinkedList, Node

__all__ = [
    "LinkedList",
    "Node",
]
