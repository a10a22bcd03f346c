"""Fixed-size array of bits with range queries and free-run scanning.

Bits are stored in 32-bit little-endian words: bit K of the bitmap is
bit ``K % 32`` of word ``K // 32``. The serialized form is
``file_size()`` bytes long and can be written to and read from a
binary file.
"""

from __future__ import annotations

from typing import BinaryIO, Optional

from .printf import hex_dump
from .rounding import div_round_up

_ELEM_BYTES = 4
_ELEM_BITS = _ELEM_BYTES * 8


def _byte_cnt(bit_cnt: int) -> int:
    return _ELEM_BYTES * div_round_up(bit_cnt, _ELEM_BITS)


class Bitmap:
    """An array of ``bit_cnt`` bits, all initially false."""

    def __init__(self, bit_cnt: int) -> None:
        if bit_cnt < 0:
            raise ValueError(f"bit count must be non-negative, got {bit_cnt}")
        self._bit_cnt = bit_cnt
        self._bits = bytearray(_byte_cnt(bit_cnt))

    def __len__(self) -> int:
        return self._bit_cnt

    def __repr__(self) -> str:
        bits = "".join("1" if self.test(i) else "0" for i in range(self._bit_cnt))
        return f"Bitmap({self._bit_cnt}, bits={bits!r})"

    # Single bits.

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < self._bit_cnt:
            raise IndexError(
                f"bit index {idx} out of range for bitmap of {self._bit_cnt} bits"
            )

    def _check_range(self, start: int, cnt: int) -> None:
        if not 0 <= start <= self._bit_cnt:
            raise ValueError(
                f"start {start} out of range for bitmap of {self._bit_cnt} bits"
            )
        if cnt < 0 or start + cnt > self._bit_cnt:
            raise ValueError(
                f"range of {cnt} bits at {start} exceeds bitmap of "
                f"{self._bit_cnt} bits"
            )

    def set(self, idx: int, value: bool) -> None:
        """Set bit IDX to VALUE."""
        if value:
            self.mark(idx)
        else:
            self.reset(idx)

    def mark(self, idx: int) -> None:
        """Set bit IDX to true."""
        self._check_index(idx)
        self._bits[idx >> 3] |= 1 << (idx & 7)

    def reset(self, idx: int) -> None:
        """Set bit IDX to false."""
        self._check_index(idx)
        self._bits[idx >> 3] &= ~(1 << (idx & 7)) & 0xFF

    def flip(self, idx: int) -> None:
        """Toggle bit IDX."""
        self._check_index(idx)
        self._bits[idx >> 3] ^= 1 << (idx & 7)

    def test(self, idx: int) -> bool:
        """Return the value of bit IDX."""
        self._check_index(idx)
        return bool(self._bits[idx >> 3] & (1 << (idx & 7)))

    # Ranges of bits.

    def set_all(self, value: bool) -> None:
        """Set every bit to VALUE."""
        self.set_multiple(0, self._bit_cnt, value)

    def set_multiple(self, start: int, cnt: int, value: bool) -> None:
        """Set the CNT bits starting at START to VALUE."""
        self._check_range(start, cnt)
        for idx in range(start, start + cnt):
            self.set(idx, value)

    def count(self, start: int, cnt: int, value: bool) -> int:
        """Return how many of the CNT bits starting at START equal VALUE."""
        self._check_range(start, cnt)
        value = bool(value)
        return sum(1 for idx in range(start, start + cnt) if self.test(idx) == value)

    def contains(self, start: int, cnt: int, value: bool) -> bool:
        """Return True if any of the CNT bits starting at START equals VALUE."""
        self._check_range(start, cnt)
        value = bool(value)
        return any(self.test(idx) == value for idx in range(start, start + cnt))

    def any(self, start: int, cnt: int) -> bool:
        """Return True if any bit in the range is true."""
        return self.contains(start, cnt, True)

    def none(self, start: int, cnt: int) -> bool:
        """Return True if no bit in the range is true."""
        return not self.contains(start, cnt, True)

    def all(self, start: int, cnt: int) -> bool:
        """Return True if every bit in the range is true."""
        return not self.contains(start, cnt, False)

    # Scanning.

    def scan(self, start: int, cnt: int, value: bool) -> Optional[int]:
        """Return the first index at or after START of CNT consecutive bits
        all equal to VALUE, or None if there is no such run."""
        if not 0 <= start <= self._bit_cnt:
            raise ValueError(
                f"start {start} out of range for bitmap of {self._bit_cnt} bits"
            )
        if cnt < 0:
            raise ValueError(f"count must be non-negative, got {cnt}")
        if cnt <= self._bit_cnt:
            last = self._bit_cnt - cnt
            for idx in range(start, last + 1):
                if not self.contains(idx, cnt, not value):
                    return idx
        return None

    def scan_and_flip(self, start: int, cnt: int, value: bool) -> Optional[int]:
        """Like scan(), but also sets the bits of the run found to not VALUE."""
        idx = self.scan(start, cnt, value)
        if idx is not None:
            self.set_multiple(idx, cnt, not value)
        return idx

    # Serialization.

    def file_size(self) -> int:
        """Return the number of bytes needed to store the bitmap."""
        return len(self._bits)

    def to_bytes(self) -> bytes:
        """Return the stored form of the bitmap."""
        return bytes(self._bits)

    def _mask_tail(self) -> None:
        used = self._bit_cnt % _ELEM_BITS
        if used == 0:
            return
        word_start = len(self._bits) - _ELEM_BYTES
        word = int.from_bytes(self._bits[word_start:], "little")
        word &= (1 << used) - 1
        self._bits[word_start:] = word.to_bytes(_ELEM_BYTES, "little")

    def read(self, file: BinaryIO) -> None:
        """Load the bitmap from the start of binary FILE.

        Bits past the end of the bitmap are cleared. Raises EOFError if
        the file holds fewer than file_size() bytes; whatever was read
        is still loaded.
        """
        if self._bit_cnt == 0:
            return
        size = len(self._bits)
        file.seek(0)
        data = file.read(size) or b""
        self._bits[: len(data)] = data
        self._mask_tail()
        if len(data) != size:
            raise EOFError(f"expected {size} bytes of bitmap, read {len(data)}")

    def write(self, file: BinaryIO) -> None:
        """Store the bitmap at the start of binary FILE."""
        size = len(self._bits)
        file.seek(0)
        written = file.write(bytes(self._bits))
        if written is not None and written != size:
            raise OSError(f"expected to write {size} bytes of bitmap, wrote {written}")

    def dump(self) -> str:
        """Return a hexadecimal dump of the stored bits."""
        return hex_dump(0, self.to_bytes(), False)