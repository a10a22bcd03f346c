"""String-to-integer conversion, heap sort and binary search."""

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, Optional, TypeVar

from .ctype import isdigit, isspace

T = TypeVar("T")
Compare = Callable[[Any, Any], int]


def atoi(s: str) -> int:
    """Parse a signed decimal integer prefix of S, wrapping to 32 bits.

    Leading white space is skipped, one sign is accepted, and parsing
    stops at the first non-digit.  A string with no digits yields 0.
    """
    pos = 0
    while pos < len(s) and isspace(s[pos]):
        pos += 1

    negative = False
    if pos < len(s) and s[pos] in "+-":
        negative = s[pos] == "-"
        pos += 1

    end = pos
    while end < len(s) and isdigit(s[end]):
        end += 1

    value = int(s[pos:end]) if end > pos else 0
    if negative:
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def heap_sort(items: MutableSequence[T], compare: Compare) -> None:
    """Sort ITEMS in place with heap sort.

    COMPARE(a, b) returns a negative number, zero or a positive number
    when a is less than, equal to or greater than b.
    """

    def sift_down(i: int, count: int) -> None:
        # Indexes are 1-based so that children of i are 2i and 2i+1.
        while True:
            left, right, largest = 2 * i, 2 * i + 1, i
            if left <= count and compare(items[left - 1], items[largest - 1]) > 0:
                largest = left
            if right <= count and compare(items[right - 1], items[largest - 1]) > 0:
                largest = right
            if largest == i:
                return
            items[i - 1], items[largest - 1] = items[largest - 1], items[i - 1]
            i = largest

    count = len(items)
    for i in range(count // 2, 0, -1):
        sift_down(i, count)
    for last in range(count, 1, -1):
        items[0], items[last - 1] = items[last - 1], items[0]
        sift_down(1, last - 1)


def binary_search(key: Any, items: Sequence[T], compare: Compare) -> Optional[int]:
    """Return the index of an element of sorted ITEMS equal to KEY, or None.

    COMPARE(key, element) returns a strcmp-style result.  If several
    elements match, any one of their indexes may be returned.
    """
    first, last = 0, len(items)
    while first < last:
        middle = first + (last - first) // 2
        cmp = compare(key, items[middle])
        if cmp < 0:
            last = middle
        elif cmp > 0:
            first = middle + 1
        else:
            return middle
    return None