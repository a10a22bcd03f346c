import pytest
from hypothesis import given
from hypothesis import strategies as st

from kernlib.arithmetic import (
    INT32_MAX,
    INT32_MIN,
    UINT32_MAX,
    UINT64_MAX,
)
from kernlib.printf import format_string, hex_dump, human_readable_size, snprintf


@given(st.integers(min_value=INT32_MIN, max_value=INT32_MAX))
def test_plain_decimal_matches_str(n):
    assert format_string("%d", n) == str(n)


@given(st.integers(min_value=0, max_value=UINT32_MAX))
def test_unsigned_hex_and_octal_match_python(n):
    assert format_string("%x", n) == f"{n:x}"
    assert format_string("%X", n) == f"{n:X}"
    assert format_string("%o", n) == f"{n:o}"
    assert format_string("%u", n) == str(n)


@pytest.mark.parametrize(
    "spec", ["%5d", "%-5d", "%+d", "% d", "%05d", "%.3d", "%+05d", "%8.3d", "%-8.3d"]
)
@pytest.mark.parametrize("value", [7, -42, 12345, -98765])
def test_signed_flags_match_python_formatting(spec, value):
    assert format_string(spec, value) == spec % value


@pytest.mark.parametrize("spec", ["%8x", "%-8X", "%08o", "%#x", "%#X", "%.6x", "%#10x"])
@pytest.mark.parametrize("value", [1, 255, 4096, 0xDEADBEEF])
def test_unsigned_flags_match_python_formatting(spec, value):
    assert format_string(spec, value) == spec % value


def test_pound_octal_prefixes_single_zero():
    assert format_string("%#o", 8) == "0" + format_string("%o", 8)
    assert format_string("%#o", 0) == format_string("%o", 0)


def test_pound_hex_of_zero_has_no_prefix():
    assert format_string("%#x", 0) == format_string("%x", 0)


def test_zero_precision_zero_value_is_empty():
    assert format_string("%.0d", 0) == ""


def test_integer_arguments_wrap_to_declared_width():
    assert format_string("%u", -1) == str(UINT32_MAX)
    assert format_string("%llu", -1) == str(UINT64_MAX)
    assert format_string("%d", INT32_MAX + 1) == str(INT32_MIN)
    assert format_string("%hhd", 255) == format_string("%d", -1)
    assert format_string("%hu", 65536 + 5) == format_string("%u", 5)
    assert format_string("%zd", UINT32_MAX) == format_string("%d", -1)


def test_grouping_flag():
    assert format_string("%'d", 1234567) == f"{1234567:,}"
    assert format_string("%'x", 0x12345678) == f"{0x12345678:_x}".replace("_", ",")


def test_star_width_and_precision():
    assert format_string("%*d", 6, 42) == "%6d" % 42
    assert format_string("%*d", -6, 42) == "%-6d" % 42
    assert format_string("%.*d", 4, 42) == "%.4d" % 42
    assert format_string("%.*d", -1, 42) == format_string("%d", 42)


def test_string_conversions():
    assert format_string("%s", None) == "(null)"
    assert format_string("%.3s", "abcdef") == "abcdef"[:3]
    assert format_string("%5s", "ab") == "ab".rjust(5)
    assert format_string("%-5s|", "ab") == "ab".ljust(5) + "|"
    assert format_string("%s", "ab\0cd") == "ab"


def test_char_conversion():
    assert format_string("%c", ord("Q")) == "Q"
    assert format_string("%3c", "z") == "z".rjust(3)


def test_pointer_conversion():
    assert format_string("%p", 0x1000) == "0x1000"
    assert format_string("%p", 0x1000) == format_string("%#x", 0x1000)


def test_percent_literal_and_unsupported():
    assert format_string("100%%") == "100%"
    assert format_string("%f", 1) == "<<no %f in kernel>>"
    assert format_string("%n") == "<<no %n in kernel>>"
    assert format_string("%q") == "<<no %q conversion>>"


def test_errors():
    with pytest.raises(ValueError):
        format_string("%d")
    with pytest.raises(ValueError):
        format_string("abc %")
    with pytest.raises(TypeError):
        format_string("%d", "x")
    with pytest.raises(TypeError):
        format_string("%s", 5)


@given(
    st.integers(min_value=0, max_value=40),
    st.integers(min_value=INT32_MIN, max_value=INT32_MAX),
    st.text(alphabet="abcxyz ", max_size=20),
)
def test_snprintf_truncates_and_reports_full_length(buf_size, n, s):
    full = format_string("%d:%s", n, s)
    text, length = snprintf(buf_size, "%d:%s", n, s)
    assert length == len(full)
    assert text == full[: max(buf_size - 1, 0)]


def test_snprintf_rejects_negative_size():
    with pytest.raises(ValueError):
        snprintf(-1, "x")


def test_hex_dump_empty():
    assert hex_dump(0, b"", True) == ""


def test_hex_dump_full_line():
    lines = hex_dump(0, bytes(range(16)), False).splitlines()
    assert len(lines) == 1
    assert lines[0].startswith(format_string("%08x  ", 0))
    assert "07-08" in lines[0]


def test_hex_dump_line_count_and_offsets():
    lines = hex_dump(0x20, bytes(40), False).splitlines()
    assert len(lines) == 3
    assert [line[:8] for line in lines] == [f"{o:08x}" for o in (0x20, 0x30, 0x40)]


def test_hex_dump_ascii_column():
    line = hex_dump(0, b"Hi!\x00", True).rstrip("\n")
    assert line.endswith("|Hi!." + " " * 12 + "|")


def test_hex_dump_unaligned_start():
    line = hex_dump(3, b"ab", True).rstrip("\n")
    assert line.startswith(format_string("%08x  ", 0) + "   " * 3 + "61 62 ")
    assert line.endswith("|" + " " * 3 + "ab" + " " * 11 + "|")


def test_human_readable_size():
    assert human_readable_size(1) == "1 byte"
    assert human_readable_size(0) == "0 bytes"
    assert human_readable_size(1024) == "1 kB"
    assert human_readable_size(1536) == human_readable_size(1024)
    assert human_readable_size(1024**5) == "1024 TB"


def test_human_readable_size_rejects_out_of_range():
    with pytest.raises(ValueError):
        human_readable_size(-1)
    with pytest.raises(ValueError):
        human_readable_size(UINT64_MAX + 1)