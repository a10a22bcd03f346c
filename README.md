# kernlib

A collection of small, self-contained utilities in the spirit of a minimal
kernel C library, written for Python. It has no dependencies outside the
standard library.

## Modules

- `kernlib.arithmetic`: 64-bit division built from 64-by-32-bit steps.
  `udiv64` and `sdiv64` divide unsigned and signed 64-bit integers (the signed
  quotient truncates toward zero and wraps to 64 bits); `umod64` and `smod64`
  return the remainder narrowed to 32 bits. `nlz` counts the leading zero bits
  of a nonzero 32-bit value. Out-of-range arguments raise `ValueError`, a zero
  divisor raises `ZeroDivisionError`. The module also defines the usual
  fixed-width limits (`INT32_MAX`, `UINT64_MAX`, `SIZE_MAX`, ...).
- `kernlib.ctype`: ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isxdigit`, `isspace`, `isblank`, `isgraph`, `isprint`,
  `iscntrl`, `isascii`, `ispunct`, `tolower`, `toupper`, ...). Each accepts a
  character code or a one-character string; `tolower` and `toupper` return the
  same kind they were given.
- `kernlib.rounding`: `round_up`, `div_round_up` and `round_down` for
  non-negative values and steps of at least 1.
- `kernlib.rc4random`: `Rc4Random`, a deterministic RC4-based generator seeded
  with an unsigned 32-bit integer, with `random_bytes(size)`,
  `random_ulong()` (an unsigned 32-bit value) and `reseed(seed)`. It is not
  meant for cryptographic use.
- `kernlib.stdlib`: `atoi` (decimal prefix parsing, wrapping to 32 bits),
  `heap_sort(items, compare)` which sorts a mutable sequence in place using a
  strcmp-style comparison, and `binary_search(key, items, compare)` which
  returns the index of a matching element or `None`.
- `kernlib.printf`: a printf-style formatter. `format_string(fmt, *args)`
  handles the `-`, `+`, space, `#`, `0` and `'` (digit grouping) flags, width
  and precision (including `*`), the length modifiers `hh h l ll j t z`, and
  the conversions `d i o u x X c s p`. `snprintf(buf_size, fmt, *args)`
  returns the text that fits in a buffer of that size together with the full
  output length. `hex_dump(ofs, data, ascii)` returns a 16-bytes-per-line hex
  listing, and `human_readable_size(size)` returns text such as `"256 kB"`.
- `kernlib.bitmap`: `Bitmap`, a fixed-size bit array with single-bit
  operations (`set`, `mark`, `reset`, `flip`, `test`), range operations
  (`set_all`, `set_multiple`, `count`, `contains`, `any`, `none`, `all`),
  free-run search (`scan`, `scan_and_flip`, returning an index or `None`),
  serialisation (`file_size`, `to_bytes`, `read`, `write` on binary files)
  and `dump`, which returns a hex listing of the stored bytes.
- `kernlib.linkedlist`: `LinkedList` of `ListNode`s. Nodes returned by
  `push_front`, `push_back` and `insert_before` can be used as positions for
  `insert_before`, `remove` and `splice` (also between lists). It offers
  `front`, `back`, `pop_front`, `pop_back`, `reverse`, a stable natural merge
  `sort`, `insert_ordered`, `unique` (optionally collecting duplicates), and
  `max` and `min`, all ordered by an optional `less(a, b)` predicate.
- `kernlib.hashtable`: `HashTable`, a chained hash table driven by a hash
  function and an optional `less` predicate (items are equal when neither is
  less than the other). `insert` returns an equal item already present
  instead of adding; `replace`, `find` and `delete` return the equal item or
  `None`; `clear` and `apply` take callbacks; `bucket_count` reports the
  current power-of-two bucket count. `hash_bytes`, `hash_string` and
  `hash_int` compute 32-bit FNV-1 hashes.

## Installation

```
pip install .
```

## Examples

```python
from kernlib.printf import format_string, human_readable_size
from kernlib.bitmap import Bitmap
from kernlib.hashtable import HashTable, hash_int

format_string("%'d|%-6s|%#x", 1234567, "ab", 255)
# '1,234,567|ab    |0xff'

human_readable_size(262144)
# '256 kB'

bits = Bitmap(16)
start = bits.scan_and_flip(0, 4, False)   # 0: four free bits now taken
bits.count(0, len(bits), True)            # 4

table = HashTable(hash_int)
table.insert(42)                          # None: 42 was added
table.find(42)                            # 42
```

## What it does not do

- The formatter has no floating-point conversions: `%f`, `%e`, `%E`, `%g`,
  `%G` and `%n` render a `<<no %f in kernel>>`-style marker instead.
- Nothing is printed to a console: `format_string`, `hex_dump`,
  `human_readable_size` and `Bitmap.dump` return strings for the caller to
  write.
- There is no command-line program; this is a library only.

## Running the tests

```
pip install ".[test]"
pytest
```