"""64-bit integer division and remainder built from 64-by-32-bit steps.

The routines mirror the fixed-width semantics of 64-bit unsigned and
signed machine integers: arguments must lie in range, quotients wrap
the way two's-complement hardware does, and the remainder helpers
narrow their results to 32 bits.
"""

CHAR_BIT = 8

INT8_MAX = 127
INT8_MIN = -INT8_MAX - 1
UINT8_MAX = 255

INT16_MAX = 32767
INT16_MIN = -INT16_MAX - 1
UINT16_MAX = 65535

INT32_MAX = 2147483647
INT32_MIN = -INT32_MAX - 1
UINT32_MAX = 4294967295

INT64_MAX = 9223372036854775807
INT64_MIN = -INT64_MAX - 1
UINT64_MAX = 18446744073709551615

INTMAX_MIN = INT64_MIN
INTMAX_MAX = INT64_MAX
UINTMAX_MAX = UINT64_MAX
SIZE_MAX = UINT32_MAX

_B = 1 << 32


def _wrap_signed(value: int, bits: int) -> int:
    modulus = 1 << bits
    value &= modulus - 1
    return value - modulus if value >= modulus >> 1 else value


def _check_unsigned(name: str, value: int) -> None:
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")


def _check_signed(name: str, value: int) -> None:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"{name} must be a signed 64-bit integer, got {value}")


def _divl(n: int, d: int) -> int:
    """Divide 64-bit N by 32-bit D, failing if the quotient exceeds 32 bits."""
    if d == 0:
        raise ZeroDivisionError("division by zero")
    quotient = n // d
    if quotient > UINT32_MAX:
        raise OverflowError("quotient does not fit in 32 bits")
    return quotient


def nlz(x: int) -> int:
    """Return the number of leading zero bits in the nonzero 32-bit value X."""
    if not 0 < x <= UINT32_MAX:
        raise ValueError(f"nlz needs a nonzero 32-bit value, got {x}")
    return 32 - x.bit_length()


def udiv64(n: int, d: int) -> int:
    """Divide unsigned 64-bit N by unsigned 64-bit D and return the quotient."""
    _check_unsigned("n", n)
    _check_unsigned("d", d)
    if d == 0:
        raise ZeroDivisionError("division by zero")

    if d >> 32 == 0:
        n1, n0 = n >> 32, n & UINT32_MAX
        return _divl(_B * (n1 % d) + n0, d) + _B * (n1 // d)

    if n < d:
        return 0
    shift = nlz(d >> 32)
    q = _divl(n >> 1, ((d << shift) & UINT64_MAX) >> 32) >> (31 - shift)
    return q - 1 if ((n - (q - 1) * d) & UINT64_MAX) < d else q


def umod64(n: int, d: int) -> int:
    """Return the remainder of unsigned N divided by D, narrowed to 32 bits."""
    return (n - d * udiv64(n, d)) & UINT32_MAX


def sdiv64(n: int, d: int) -> int:
    """Divide signed 64-bit N by D, truncating toward zero, with 64-bit wrap."""
    _check_signed("n", n)
    _check_signed("d", d)
    q_abs = udiv64(abs(n), abs(d))
    quotient = q_abs if (n < 0) == (d < 0) else -q_abs
    return _wrap_signed(quotient, 64)


def smod64(n: int, d: int) -> int:
    """Return the remainder of signed N divided by D, narrowed to 32 bits."""
    return _wrap_signed(n - d * sdiv64(n, d), 32)