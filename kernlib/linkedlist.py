"""Doubly linked list with head and tail sentinels.

Nodes can be held by callers and used as positions for insertion,
removal and splicing, including moving runs of nodes between lists.
Ordering operations take a ``less(a, b)`` predicate on values that
defaults to ``<``.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

Less = Callable[[Any, Any], bool]

__all__ = ["ListNode", "LinkedList"]


class ListNode:
    """One position in a LinkedList, holding ``value``."""

    __slots__ = ("value", "prev", "next", "_owner")

    def __init__(self, value: Any = None, owner: Optional[LinkedList] = None) -> None:
        self.value = value
        self.prev: Optional[ListNode] = None
        self.next: Optional[ListNode] = None
        self._owner = owner

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """A doubly linked list of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = ListNode(owner=self)
        self._tail = ListNode(owner=self)
        self._head.next = self._tail
        self._tail.prev = self._head
        for value in values:
            self.push_back(value)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    # Traversal.

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail.prev
        while node is not self._head:
            prev = node.prev
            yield node.value
            node = prev

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes from front to back.

        The node just yielded may be removed without disturbing the walk.
        """
        node = self._head.next
        while node is not self._tail:
            following = node.next
            yield node
            node = following

    def is_empty(self) -> bool:
        """Return True if the list has no elements."""
        return self._head.next is self._tail

    def front(self) -> Any:
        """Return the first value; IndexError if the list is empty."""
        if self.is_empty():
            raise IndexError("front of an empty list")
        return self._head.next.value

    def back(self) -> Any:
        """Return the last value; IndexError if the list is empty."""
        if self.is_empty():
            raise IndexError("back of an empty list")
        return self._tail.prev.value

    # Internal linking.

    def _is_interior(self, node: Any) -> bool:
        return (
            isinstance(node, ListNode)
            and node._owner is self
            and node is not self._head
            and node is not self._tail
        )

    def _position(self, before: Optional[ListNode]) -> ListNode:
        if before is None:
            return self._tail
        if before is self._tail or self._is_interior(before):
            return before
        raise ValueError("position is not a node of this list")

    def _link_before(self, before: ListNode, node: ListNode) -> ListNode:
        node._owner = self
        node.prev = before.prev
        node.next = before
        before.prev.next = node
        before.prev = node
        return node

    @staticmethod
    def _unlink(node: ListNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev

    @staticmethod
    def _move_range(before: ListNode, first: ListNode, last: ListNode) -> None:
        """Move FIRST through LAST (inclusive) to just before BEFORE."""
        first.prev.next = last.next
        last.next.prev = first.prev
        first.prev = before.prev
        last.next = before
        before.prev.next = first
        before.prev = last

    # Insertion.

    def push_front(self, value: Any) -> ListNode:
        """Insert VALUE at the front and return its node."""
        return self._link_before(self._head.next, ListNode(value))

    def push_back(self, value: Any) -> ListNode:
        """Insert VALUE at the back and return its node."""
        return self._link_before(self._tail, ListNode(value))

    def insert_before(self, node: Optional[ListNode], value: Any) -> ListNode:
        """Insert VALUE just before NODE, or at the back if NODE is None."""
        return self._link_before(self._position(node), ListNode(value))

    def splice(
        self,
        before: Optional[ListNode],
        first: ListNode,
        last: Optional[ListNode] = None,
    ) -> None:
        """Move the nodes FIRST up to LAST (exclusive) to just before BEFORE.

        FIRST and LAST belong to the same list, which may be this one or
        another. LAST of None means the end of that list; BEFORE of None
        means the end of this list.
        """
        target = self._position(before)
        if first is last:
            return
        source = first._owner if isinstance(first, ListNode) else None
        if source is None or not source._is_interior(first):
            raise ValueError("first is not an element of a list")
        if last is None:
            last = source._tail
        elif not (last is source._tail or source._is_interior(last)):
            raise ValueError("last is not in the same list as first")
        last_incl = last.prev
        if not source._is_interior(last_incl):
            raise ValueError("range to splice is empty or reversed")

        self._move_range(target, first, last_incl)
        if source is not self:
            node = first
            while True:
                node._owner = self
                if node is last_incl:
                    break
                node = node.next

    # Removal.

    def remove(self, node: ListNode) -> Optional[ListNode]:
        """Remove NODE and return the node that followed it, or None."""
        if not self._is_interior(node):
            raise ValueError("node is not an element of this list")
        following = node.next
        self._unlink(node)
        node.prev = node.next = None
        node._owner = None
        return None if following is self._tail else following

    def pop_front(self) -> Any:
        """Remove the first element and return its value."""
        if self.is_empty():
            raise IndexError("pop from an empty list")
        node = self._head.next
        self.remove(node)
        return node.value

    def pop_back(self) -> Any:
        """Remove the last element and return its value."""
        if self.is_empty():
            raise IndexError("pop from an empty list")
        node = self._tail.prev
        self.remove(node)
        return node.value

    # Reordering.

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        if self.is_empty():
            return
        node = self._head.next
        while node is not self._tail:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        first, last = self._tail.prev, self._head.next
        self._head.next, self._tail.prev = first, last
        first.prev = self._head
        last.next = self._tail

    def _end_of_run(self, node: ListNode, less: Less) -> ListNode:
        node = node.next
        while node is not self._tail and not less(node.value, node.prev.value):
            node = node.next
        return node

    def _merge(self, a0: ListNode, a1b0: ListNode, b1: ListNode, less: Less) -> None:
        while a0 is not a1b0 and a1b0 is not b1:
            if not less(a1b0.value, a0.value):
                a0 = a0.next
            else:
                a1b0 = a1b0.next
                moved = a1b0.prev
                self._move_range(a0, moved, moved)

    def sort(self, less: Optional[Less] = None) -> None:
        """Sort stably in place with a natural merge sort."""
        less = less or operator.lt
        while True:
            output_runs = 0
            a0 = self._head.next
            while a0 is not self._tail:
                output_runs += 1
                a1b0 = self._end_of_run(a0, less)
                if a1b0 is self._tail:
                    break
                b1 = self._end_of_run(a1b0, less)
                self._merge(a0, a1b0, b1, less)
                a0 = b1
            if output_runs <= 1:
                return

    def insert_ordered(self, value: Any, less: Optional[Less] = None) -> ListNode:
        """Insert VALUE into this sorted list, after any equal elements."""
        less = less or operator.lt
        position = self._tail
        for node in self.nodes():
            if less(value, node.value):
                position = node
                break
        return self._link_before(position, ListNode(value))

    def unique(
        self,
        less: Optional[Less] = None,
        duplicates: Optional[LinkedList] = None,
    ) -> None:
        """Keep only the first of each run of adjacent equal elements.

        Removed nodes are appended to DUPLICATES when it is given.
        """
        less = less or operator.lt
        if self.is_empty():
            return
        elem = self._head.next
        while elem.next is not self._tail:
            following = elem.next
            if not less(elem.value, following.value) and not less(
                following.value, elem.value
            ):
                self._unlink(following)
                if duplicates is not None:
                    duplicates._link_before(duplicates._tail, following)
                else:
                    following.prev = following.next = None
                    following._owner = None
            else:
                elem = following

    # Extremes.

    def max(self, less: Optional[Less] = None) -> Any:
        """Return the largest value, the earliest of equal maxima."""
        less = less or operator.lt
        if self.is_empty():
            raise ValueError("max of an empty list")
        best = self._head.next
        for node in self.nodes():
            if less(best.value, node.value):
                best = node
        return best.value

    def min(self, less: Optional[Less] = None) -> Any:
        """Return the smallest value, the earliest of equal minima."""
        less = less or operator.lt
        if self.is_empty():
            raise ValueError("min of an empty list")
        best = self._head.next
        for node in self.nodes():
            if less(node.value, best.value):
                best = node
        return best.value