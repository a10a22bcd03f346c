"""Chained hash table keyed by a caller-supplied hash and ordering.

Items are placed in one of a power-of-two number of buckets chosen by
``hash_func(item)``. Two items are equal when neither is ``less`` than
the other. The bucket count follows the number of items, aiming at
about two items per bucket and never dropping below four.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any, Optional

__all__ = ["HashTable", "hash_bytes", "hash_string", "hash_int"]

HashFunc = Callable[[Any], int]
Less = Callable[[Any, Any], bool]
Action = Callable[[Any], None]

_FNV_32_PRIME = 16777619
_FNV_32_BASIS = 2166136261
_MASK_32 = 0xFFFFFFFF

_MIN_BUCKETS = 4
_BEST_ELEMS_PER_BUCKET = 2


def _turn_off_least_1bit(x: int) -> int:
    return x & (x - 1)


def _is_power_of_2(x: int) -> bool:
    return x != 0 and _turn_off_least_1bit(x) == 0


class HashTable:
    """A set of items, searched by hash and compared with ``less``."""

    def __init__(self, hash_func: HashFunc, less: Optional[Less] = None) -> None:
        self._hash = hash_func
        self._less = less or operator.lt
        self._buckets: list[list[Any]] = [[] for _ in range(_MIN_BUCKETS)]
        self._count = 0

    def __repr__(self) -> str:
        return f"HashTable({list(self)!r})"

    # Information.

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            yield from list(bucket)

    def is_empty(self) -> bool:
        """Return True if the table holds no items."""
        return self._count == 0

    def bucket_count(self) -> int:
        """Return the current number of buckets, a power of two."""
        return len(self._buckets)

    # Internals.

    def _bucket_for(self, item: Any) -> list[Any]:
        return self._buckets[self._hash(item) & (len(self._buckets) - 1)]

    def _equal(self, a: Any, b: Any) -> bool:
        return not self._less(a, b) and not self._less(b, a)

    def _find_in(self, bucket: list[Any], item: Any) -> Optional[int]:
        for pos, candidate in enumerate(bucket):
            if self._equal(candidate, item):
                return pos
        return None

    def _rehash(self) -> None:
        new_cnt = max(self._count // _BEST_ELEMS_PER_BUCKET, _MIN_BUCKETS)
        while not _is_power_of_2(new_cnt):
            new_cnt = _turn_off_least_1bit(new_cnt)
        if new_cnt == len(self._buckets):
            return
        old_buckets = self._buckets
        self._buckets = [[] for _ in range(new_cnt)]
        for bucket in old_buckets:
            for item in bucket:
                self._bucket_for(item).insert(0, item)

    # Search, insertion, deletion.

    def insert(self, item: Any) -> Optional[Any]:
        """Add ITEM unless an equal item is present.

        Returns the equal item already present, or None if ITEM was added.
        """
        bucket = self._bucket_for(item)
        pos = self._find_in(bucket, item)
        old = None
        if pos is None:
            bucket.insert(0, item)
            self._count += 1
        else:
            old = bucket[pos]
        self._rehash()
        return old

    def replace(self, item: Any) -> Optional[Any]:
        """Add ITEM, removing and returning any equal item present."""
        bucket = self._bucket_for(item)
        pos = self._find_in(bucket, item)
        old = None
        if pos is not None:
            old = bucket.pop(pos)
            self._count -= 1
        bucket.insert(0, item)
        self._count += 1
        self._rehash()
        return old

    def find(self, item: Any) -> Optional[Any]:
        """Return the item equal to ITEM, or None."""
        bucket = self._bucket_for(item)
        pos = self._find_in(bucket, item)
        return None if pos is None else bucket[pos]

    def delete(self, item: Any) -> Optional[Any]:
        """Remove and return the item equal to ITEM, or None if absent."""
        bucket = self._bucket_for(item)
        pos = self._find_in(bucket, item)
        if pos is None:
            return None
        found = bucket.pop(pos)
        self._count -= 1
        self._rehash()
        return found

    # Bulk operations.

    def clear(self, destructor: Optional[Action] = None) -> None:
        """Remove every item, passing each to DESTRUCTOR when it is given.

        The bucket count is left unchanged.
        """
        for bucket in self._buckets:
            if destructor is not None:
                while bucket:
                    destructor(bucket.pop(0))
            bucket.clear()
        self._count = 0

    def apply(self, action: Action) -> None:
        """Call ACTION on every item, in no particular order."""
        if action is None:
            raise TypeError("action must be callable")
        for item in self:
            action(item)


def hash_bytes(data: bytes) -> int:
    """Return the 32-bit Fowler-Noll-Vo (FNV-1) hash of DATA."""
    if data is None:
        raise TypeError("data must be bytes")
    value = _FNV_32_BASIS
    for byte in bytes(data):
        value = ((value * _FNV_32_PRIME) & _MASK_32) ^ byte
    return value


def hash_string(s: str) -> int:
    """Return the FNV-1 hash of the UTF-8 bytes of S up to any NUL."""
    if s is None:
        raise TypeError("s must be a string")
    return hash_bytes(s.encode("utf-8").split(b"\0", 1)[0])


def hash_int(i: int) -> int:
    """Return the FNV-1 hash of the signed 32-bit integer I."""
    if not -(1 << 31) <= i < (1 << 31):
        raise ValueError(f"i must be a signed 32-bit integer, got {i}")
    return hash_bytes((i & _MASK_32).to_bytes(4, "little"))