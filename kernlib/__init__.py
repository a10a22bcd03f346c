"""Kernel-style utilities: 64-bit division, ASCII ctype, rounding, an RC4 generator, heap sort and search, printf formatting, bitmaps, linked lists and hash tables."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "bitmap",
    "ctype",
    "hashtable",
    "linkedlist",
    "printf",
    "rc4random",
    "rounding",
    "stdlib",
]