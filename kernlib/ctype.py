"""ASCII character classification and case conversion.

Each function accepts a character code or a one-character string.
Codes outside the ASCII range are never classified as anything.
"""

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def islower(c: Char) -> bool:
    """True for 'a' through 'z'."""
    c = _code(c)
    return ord("a") <= c <= ord("z")


def isupper(c: Char) -> bool:
    """True for 'A' through 'Z'."""
    c = _code(c)
    return ord("A") <= c <= ord("Z")


def isalpha(c: Char) -> bool:
    """True for ASCII letters."""
    return islower(c) or isupper(c)


def isdigit(c: Char) -> bool:
    """True for '0' through '9'."""
    c = _code(c)
    return ord("0") <= c <= ord("9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isxdigit(c: Char) -> bool:
    """True for hexadecimal digits of either case."""
    code = _code(c)
    return (
        isdigit(code)
        or ord("a") <= code <= ord("f")
        or ord("A") <= code <= ord("F")
    )


def isspace(c: Char) -> bool:
    """True for space, form feed, newline, carriage return and tabs."""
    return _code(c) in (0x20, 0x0C, 0x0A, 0x0D, 0x09, 0x0B)


def isblank(c: Char) -> bool:
    """True for space and horizontal tab."""
    return _code(c) in (0x20, 0x09)


def isgraph(c: Char) -> bool:
    """True for printable characters other than space."""
    return 32 < _code(c) < 127


def isprint(c: Char) -> bool:
    """True for printable characters, space included."""
    return 32 <= _code(c) < 127


def iscntrl(c: Char) -> bool:
    """True for control characters, DEL included."""
    c = _code(c)
    return 0 <= c < 32 or c == 127


def isascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) < 128


def ispunct(c: Char) -> bool:
    """True for printable characters that are neither alphanumeric nor space."""
    return isprint(c) and not isalnum(c) and not isspace(c)


def tolower(c: Char) -> Char:
    """Map an upper-case letter to lower case; return other input unchanged."""
    code = _code(c)
    if isupper(code):
        code = code - ord("A") + ord("a")
    return chr(code) if isinstance(c, str) else code


def toupper(c: Char) -> Char:
    """Map a lower-case letter to upper case; return other input unchanged."""
    code = _code(c)
    if islower(code):
        code = code - ord("a") + ord("A")
    return chr(code) if isinstance(c, str) else code