"""printf-style formatting with fixed-width integer semantics.

Integer arguments are narrowed to the width named by the length
modifier (``hh``, ``h``, ``l``, ``ll``, ``j``, ``t``, ``z``), with
``int``, ``long``, ``ptrdiff_t`` and ``size_t`` all 32 bits wide.
Floating-point conversions and ``%n`` are not supported and render
a marker instead.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .arithmetic import UINT64_MAX
from .ctype import isdigit, isprint
from .rounding import round_down

__all__ = ["format_string", "snprintf", "hex_dump", "human_readable_size"]


class _Flag(enum.IntFlag):
    MINUS = 1 << 0
    PLUS = 1 << 1
    SPACE = 1 << 2
    POUND = 1 << 3
    ZERO = 1 << 4
    GROUP = 1 << 5


_FLAG_CHARS = {
    "-": _Flag.MINUS,
    "+": _Flag.PLUS,
    " ": _Flag.SPACE,
    "#": _Flag.POUND,
    "0": _Flag.ZERO,
    "'": _Flag.GROUP,
}


class _ArgType(enum.Enum):
    CHAR = 8
    SHORT = 16
    INT = 32
    INTMAX = 64
    LONG = 33
    LONGLONG = 65
    PTRDIFFT = 34
    SIZET = 35

    @property
    def bits(self) -> int:
        return {
            _ArgType.CHAR: 8,
            _ArgType.SHORT: 16,
            _ArgType.INT: 32,
            _ArgType.INTMAX: 64,
            _ArgType.LONG: 32,
            _ArgType.LONGLONG: 64,
            _ArgType.PTRDIFFT: 32,
            _ArgType.SIZET: 32,
        }[self]


@dataclass
class _Conversion:
    flags: _Flag
    width: int
    precision: int
    type: _ArgType


@dataclass(frozen=True)
class _IntegerBase:
    base: int
    digits: str
    x: str
    group: int


_BASE_D = _IntegerBase(10, "0123456789", "", 3)
_BASE_O = _IntegerBase(8, "01234567", "", 3)
_BASE_X = _IntegerBase(16, "0123456789abcdef", "x", 4)
_BASE_UPPER_X = _IntegerBase(16, "0123456789ABCDEF", "X", 4)

_UNSIGNED_BASES = {"o": _BASE_O, "u": _BASE_D, "x": _BASE_X, "X": _BASE_UPPER_X}
_UNSUPPORTED = set("feEgGn")


def _to_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _to_signed(value: int, bits: int) -> int:
    value = _to_unsigned(value, bits)
    return value - (1 << bits) if value >= 1 << (bits - 1) else value


class _Args:
    """Sequential access to the variadic arguments of one format call."""

    def __init__(self, args: tuple[Any, ...]) -> None:
        self._it: Iterator[Any] = iter(args)

    def next(self) -> Any:
        try:
            return next(self._it)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None

    def next_int(self) -> int:
        value = self.next()
        if not isinstance(value, int):
            raise TypeError(f"expected an integer argument, got {value!r}")
        return value


def _parse_conversion(fmt: str, pos: int, args: _Args) -> tuple[_Conversion, int]:
    def peek() -> str:
        return fmt[pos] if pos < len(fmt) else ""

    flags = _Flag(0)
    while peek() in _FLAG_CHARS and peek():
        flags |= _FLAG_CHARS[peek()]
        pos += 1
    if flags & _Flag.MINUS:
        flags &= ~_Flag.ZERO
    if flags & _Flag.PLUS:
        flags &= ~_Flag.SPACE

    width = 0
    if peek() == "*":
        pos += 1
        width = _to_signed(args.next_int(), 32)
    else:
        while peek() and isdigit(peek()):
            width = width * 10 + int(peek())
            pos += 1
    if width < 0:
        width = -width
        flags |= _Flag.MINUS

    precision = -1
    if peek() == ".":
        pos += 1
        if peek() == "*":
            pos += 1
            precision = _to_signed(args.next_int(), 32)
        else:
            precision = 0
            while peek() and isdigit(peek()):
                precision = precision * 10 + int(peek())
                pos += 1
        if precision < 0:
            precision = -1
    if precision >= 0:
        flags &= ~_Flag.ZERO

    arg_type = _ArgType.INT
    modifier = peek()
    if modifier == "h":
        pos += 1
        if peek() == "h":
            pos += 1
            arg_type = _ArgType.CHAR
        else:
            arg_type = _ArgType.SHORT
    elif modifier == "l":
        pos += 1
        if peek() == "l":
            pos += 1
            arg_type = _ArgType.LONGLONG
        else:
            arg_type = _ArgType.LONG
    elif modifier == "j":
        pos += 1
        arg_type = _ArgType.INTMAX
    elif modifier == "t":
        pos += 1
        arg_type = _ArgType.PTRDIFFT
    elif modifier == "z":
        pos += 1
        arg_type = _ArgType.SIZET

    return _Conversion(flags, width, precision, arg_type), pos


def _format_integer(
    value: int,
    is_signed: bool,
    negative: bool,
    base: _IntegerBase,
    conv: _Conversion,
) -> str:
    flags = conv.flags

    sign = ""
    if is_signed:
        if flags & _Flag.PLUS:
            sign = "-" if negative else "+"
        elif flags & _Flag.SPACE:
            sign = "-" if negative else " "
        elif negative:
            sign = "-"

    x = base.x if (flags & _Flag.POUND) and value else ""

    # Digits are collected least significant first.
    reversed_digits: list[str] = []
    digit_cnt = 0
    while value > 0:
        if flags & _Flag.GROUP and digit_cnt > 0 and digit_cnt % base.group == 0:
            reversed_digits.append(",")
        value, digit = divmod(value, base.base)
        reversed_digits.append(base.digits[digit])
        digit_cnt += 1

    precision = 1 if conv.precision < 0 else conv.precision
    while len(reversed_digits) < precision and len(reversed_digits) < 63:
        reversed_digits.append("0")
    if (
        flags & _Flag.POUND
        and base.base == 8
        and (not reversed_digits or reversed_digits[-1] != "0")
    ):
        reversed_digits.append("0")

    pad_cnt = max(
        conv.width - len(reversed_digits) - (2 if x else 0) - (1 if sign else 0), 0
    )

    parts: list[str] = []
    if not flags & (_Flag.MINUS | _Flag.ZERO):
        parts.append(" " * pad_cnt)
    parts.append(sign)
    if x:
        parts.append("0" + x)
    if flags & _Flag.ZERO:
        parts.append("0" * pad_cnt)
    parts.append("".join(reversed(reversed_digits)))
    if flags & _Flag.MINUS:
        parts.append(" " * pad_cnt)
    return "".join(parts)


def _format_text(text: str, conv: _Conversion) -> str:
    pad = " " * max(conv.width - len(text), 0)
    return text + pad if conv.flags & _Flag.MINUS else pad + text


def _char_arg(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c needs a character or an integer, got {value!r}")


def _string_arg(value: Any, precision: int) -> str:
    if value is None:
        value = "(null)"
    elif not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {value!r}")
    value = value.split("\0", 1)[0]
    return value if precision < 0 else value[:precision]


def _convert(spec: str, conv: _Conversion, args: _Args) -> str:
    if spec in "di":
        value = _to_signed(args.next_int(), conv.type.bits)
        return _format_integer(abs(value), True, value < 0, _BASE_D, conv)
    if spec in _UNSIGNED_BASES:
        value = _to_unsigned(args.next_int(), conv.type.bits)
        return _format_integer(value, False, False, _UNSIGNED_BASES[spec], conv)
    if spec == "c":
        return _format_text(_char_arg(args.next()), conv)
    if spec == "s":
        return _format_text(_string_arg(args.next(), conv.precision), conv)
    if spec == "p":
        pointer = args.next()
        if pointer is None:
            pointer = 0
        elif not isinstance(pointer, int):
            raise TypeError(f"%p needs an integer address, got {pointer!r}")
        conv.flags = _Flag.POUND
        return _format_integer(_to_unsigned(pointer, 32), False, False, _BASE_X, conv)
    if spec in _UNSUPPORTED:
        return f"<<no %{spec} in kernel>>"
    return f"<<no %{spec} conversion>>"


def format_string(fmt: str, *args: Any) -> str:
    """Format ARGS according to the printf-style format FMT."""
    arg_source = _Args(args)
    out: list[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        pos += 1
        if ch != "%":
            out.append(ch)
            continue
        if pos < len(fmt) and fmt[pos] == "%":
            out.append("%")
            pos += 1
            continue
        conv, pos = _parse_conversion(fmt, pos, arg_source)
        if pos >= len(fmt):
            raise ValueError("format string ends inside a conversion")
        spec = fmt[pos]
        pos += 1
        out.append(_convert(spec, conv, arg_source))
    return "".join(out)


def snprintf(buf_size: int, fmt: str, *args: Any) -> tuple[str, int]:
    """Format into a buffer of BUF_SIZE characters, terminator included.

    Returns the text that fits (at most BUF_SIZE - 1 characters) and the
    length the full output would have had.
    """
    if buf_size < 0:
        raise ValueError(f"buf_size must be non-negative, got {buf_size}")
    full = format_string(fmt, *args)
    return full[: max(buf_size - 1, 0)], len(full)


def hex_dump(ofs: int, data: bytes, ascii: bool = False) -> str:
    """Render DATA as hex bytes, 16 per line, labelled from offset OFS.

    With ASCII set, printable characters are shown alongside.
    """
    if ofs < 0:
        raise ValueError(f"ofs must be non-negative, got {ofs}")
    per_line = 16
    view = memoryview(bytes(data))
    lines: list[str] = []
    while view:
        start = ofs % per_line
        end = min(per_line, start + len(view))
        n = end - start
        chunk = view[:n]

        parts = [format_string("%08jx  ", round_down(ofs, per_line)), "   " * start]
        for i, byte in enumerate(chunk, start):
            parts.append(
                format_string("%02hhx%c", byte, "-" if i == per_line // 2 - 1 else " ")
            )
        if ascii:
            parts.append("   " * (per_line - end))
            parts.append("|")
            parts.append(" " * start)
            parts.extend(chr(b) if isprint(b) else "." for b in chunk)
            parts.append(" " * (per_line - end))
            parts.append("|")
        lines.append("".join(parts) + "\n")

        ofs += n
        view = view[n:]
    return "".join(lines)


def human_readable_size(size: int) -> str:
    """Describe SIZE bytes in a human-readable form such as "256 kB"."""
    if not 0 <= size <= UINT64_MAX:
        raise ValueError(f"size must be an unsigned 64-bit integer, got {size}")
    if size == 1:
        return "1 byte"
    factors = ["bytes", "kB", "MB", "GB", "TB"]
    unit = 0
    while size >= 1024 and unit + 1 < len(factors):
        size //= 1024
        unit += 1
    return format_string("%llu %s", size, factors[unit])