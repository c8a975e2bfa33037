from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from ..errors import EmptyCollectionError, InvalidArgumentError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A single element of a :class:`LinkedList` and the handle callers edit by."""

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional["Node[T]"] = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Node({self.data!r})"


class LinkedList(Generic[T]):
    """A generic singly-linked list edited through node handles.

    Implementation notes
    --------------------
    • ``head`` and ``tail`` are both None exactly when the list is empty.
    • Appending is O(1) through ``tail``; everything that needs a
      predecessor (removals, ``insert_before``) walks from ``head``.
    • Handles are matched by identity (``is``), never by data equality, so a
      node from another list is simply "not found".
    • Every precondition is checked before any link changes; a failing call
      leaves the list untouched.
    """

    __slots__ = ("head", "tail")

    def __init__(self, source: Optional[Sequence[T] | LinkedList[T]] = None) -> None:
        self.head: Optional[Node[T]] = None
        self.tail: Optional[Node[T]] = None

        if source is None:
            return
        if isinstance(source, LinkedList):
            self._copy_nodes(source)
        elif _is_ordered_sequence(source):
            self._extend(source)
        else:
            raise InvalidArgumentError(
                f"LinkedList source must be a sequence or a LinkedList, not {type(source).__name__}"
            )

    @classmethod
    def from_sequence(cls, items: Sequence[T]) -> "LinkedList[T]":
        """Build a list whose order matches `items`."""
        if not _is_ordered_sequence(items):
            raise InvalidArgumentError(f"expected an ordered sequence, not {type(items).__name__}")
        out: LinkedList[T] = cls()
        out._extend(items)
        return out

    @classmethod
    def from_list(cls, other: "LinkedList[T]") -> "LinkedList[T]":
        """Build an independent node-by-node copy of `other`."""
        if not isinstance(other, LinkedList):
            raise InvalidArgumentError(f"expected a LinkedList, not {type(other).__name__}")
        out: LinkedList[T] = cls()
        out._copy_nodes(other)
        return out

    # ------------------------------- internals -------------------------------

    def _append(self, data: T) -> Node[T]:
        node = Node(data)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def _extend(self, items: Sequence[T]) -> None:
        for item in items:
            self._append(item)

    def _copy_nodes(self, other: "LinkedList[T]") -> None:
        count = 0
        n = other.head
        while n is not None:
            self._append(n.data)
            n = n.next
            count += 1
        logger.debug("copied %d node(s) from %s", count, hex(id(other)))

    def _require_nodes(self, message: str) -> None:
        if self.head is None:
            raise EmptyCollectionError(message)

    @staticmethod
    def _require_handle(node: Any) -> None:
        if node is None:
            raise InvalidArgumentError("a node handle is required")
        if not isinstance(node, Node):
            raise InvalidArgumentError(f"expected a Node handle, not {type(node).__name__}")

    @staticmethod
    def _require_data(data: Any) -> None:
        if data is None:
            raise InvalidArgumentError("data must not be None")

    # --------------------------------- API -----------------------------------

    def add_data(self, data: T) -> Node[T]:
        """Append `data` at the tail and return its node. O(1).

        Raises:
            InvalidArgumentError: if `data` is None.
        """
        self._require_data(data)
        return self._append(data)

    def to_array(self) -> List[T]:
        """Return the data of every node, head to tail, as a new list.

        Raises:
            EmptyCollectionError: if the list has no nodes.
        """
        self._require_nodes("cannot convert an empty list to an array")
        return list(self)

    def remove_last_node(self) -> T:
        """Remove the tail node and return its data. O(n).

        There are no back-links, so the node before the tail is found by
        walking from the head.

        Raises:
            EmptyCollectionError: if the list has no nodes.
        """
        self._require_nodes("remove_last_node on empty list")

        prev: Optional[Node[T]] = None
        cur = self.head
        while cur.next is not None:
            prev, cur = cur, cur.next

        if prev is None:
            self.head = None
            self.tail = None
        else:
            prev.next = None
            self.tail = prev
        return cur.data

    def remove_node(self, target: Node[T]) -> Optional[T]:
        """Unlink `target` and return its data, or None if it is not in this list.

        Raises:
            EmptyCollectionError: if the list has no nodes.
            InvalidArgumentError: if `target` is None.
        """
        self._require_nodes("remove_node on empty list")
        if target is None:
            raise InvalidArgumentError("a node handle is required")

        prev: Optional[Node[T]] = None
        cur = self.head
        while cur is not None:
            if cur is target:
                if prev is None:
                    self.head = cur.next
                    if self.head is None:
                        self.tail = None
                else:
                    prev.next = cur.next
                    if cur is self.tail:
                        self.tail = prev
                cur.next = None
                return cur.data
            prev, cur = cur, cur.next

        logger.debug("remove_node: handle %r not found", target)
        return None

    def insert_after(self, existing: Node[T], data: T) -> Optional[Node[T]]:
        """Insert `data` right after `existing`; return the new node or None if
        `existing` is not in this list.

        Raises:
            InvalidArgumentError: if `existing` is not a node or `data` is None.
        """
        self._require_handle(existing)
        self._require_data(data)

        cur = self.head
        while cur is not None:
            if cur is existing:
                node = Node(data, cur.next)
                cur.next = node
                if cur is self.tail:
                    self.tail = node
                return node
            cur = cur.next

        logger.debug("insert_after: handle %r not found", existing)
        return None

    def insert_before(self, existing: Node[T], data: T) -> Optional[Node[T]]:
        """Insert `data` right before `existing`; return the new node or None if
        `existing` is not in this list.

        Raises:
            InvalidArgumentError: if `existing` is not a node or `data` is None.
        """
        self._require_handle(existing)
        self._require_data(data)

        prev: Optional[Node[T]] = None
        cur = self.head
        while cur is not None:
            if cur is existing:
                node = Node(data, cur)
                if prev is None:
                    self.head = node
                else:
                    prev.next = node
                return node
            prev, cur = cur, cur.next

        logger.debug("insert_before: handle %r not found", existing)
        return None

    def list_length(self) -> int:
        """Number of nodes, counted by walking the chain. O(n)."""
        count = 0
        n = self.head
        while n is not None:
            count += 1
            n = n.next
        return count

    def traverse(self, visit: Callable[[Node[T]], Any]) -> None:
        """Call `visit` once per node, head to tail, with the live node.

        The visitor must not change the list's structure while it runs.
        """
        n = self.head
        while n is not None:
            visit(n)
            n = n.next

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return the data accepted by `predicate`, in list order.

        Raises:
            EmptyCollectionError: if the list has no nodes (same as ``to_array``).
        """
        return [v for v in self.to_array() if predicate(v)]

    def nodes(self) -> Iterator[Node[T]]:
        """Yield the live node handles from head to tail."""
        n = self.head
        while n is not None:
            yield n
            n = n.next

    def is_empty(self) -> bool:
        return self.head is None

    def check_invariants(self) -> None:
        """Walk the chain and check that head, tail and links agree.

        Raises ``AssertionError`` explicitly, so the check still runs under
        ``python -O``.

        Raises:
            AssertionError: if any structural invariant is broken.
        """
        if self.head is None or self.tail is None:
            if self.head is not None or self.tail is not None:
                raise AssertionError("head/tail disagree on emptiness")
            return
        if self.tail.next is not None:
            raise AssertionError("tail has a successor")

        seen = set()
        n = self.head
        last = n
        while n is not None:
            if id(n) in seen:
                raise AssertionError("cycle in node chain")
            seen.add(id(n))
            last = n
            n = n.next
        if last is not self.tail:
            raise AssertionError("tail is not the last reachable node")

    def __len__(self) -> int:
        return self.list_length()

    def __iter__(self) -> Iterator[T]:
        """Yield data from head to tail (empty lists yield nothing)."""
        for n in self.nodes():
            yield n.data

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LinkedList({list(self)!r})"


def _is_ordered_sequence(obj: Any) -> bool:
    # Text and byte strings are sequences of characters, not of elements.
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))
