"""Unit tests for the CLI text helpers."""

from __future__ import annotations

import math

import pytest

from fixedwidth.formats import FloatFormat, IntFormat
from fixedwidth.utils.hexfmt import format_hex, parse_hex_bytes, parse_number


class TestParseHexBytes:
    """Test reading the decode argument."""

    @pytest.mark.parametrize(
        "text",
        [
            "E8 08 B0 04",
            "e8,08,b0,04",
            "0xE8 0x08 0xB0 0x04",
            "E808B004",
            "e8:08:b0:04",
            "  E8_08_B0_04  ",
            "E808 B004",
        ],
    )
    def test_accepted_spellings(self, text: str) -> None:
        """All accepted spellings give the same bytes."""
        assert parse_hex_bytes(text) == b"\xe8\x08\xb0\x04"

    def test_single_digit_groups(self) -> None:
        """A lone digit is one zero-padded byte."""
        assert parse_hex_bytes("F 1") == b"\x0f\x01"
        assert parse_hex_bytes("0xF") == b"\x0f"

    def test_blank(self) -> None:
        """Blank input is no bytes."""
        assert parse_hex_bytes("   ") == b""

    def test_length_left_to_decoder(self) -> None:
        """Any whole number of bytes is returned as is."""
        assert len(parse_hex_bytes("00 " * 40)) == 40

    @pytest.mark.parametrize(
        "text, message",
        [("ABC", "odd number of hex digits"), ("ZZ", "is not hex"), ("12 3G", "'3G' is not hex")],
    )
    def test_malformed(self, text: str, message: str) -> None:
        """Malformed groups raise ValueError naming the group."""
        with pytest.raises(ValueError, match=message):
            parse_hex_bytes(text)


def test_format_hex() -> None:
    """Upper case, space separated."""
    assert format_hex(b"\xff\x00\x7f") == "FF 00 7F"
    assert format_hex(b"") == ""


class TestParseNumber:
    """Test reading the encode argument for a target format."""

    I32 = IntFormat(width=32, signed=True)
    F64 = FloatFormat(width=64)

    @pytest.mark.parametrize(
        "text, expected",
        [("1234", 1234), (" -1 ", -1), ("0x4D2", 1234), ("0b101", 5), ("0o17", 15), ("1_000_000", 1000000)],
    )
    def test_integer_literals(self, text: str, expected: int) -> None:
        """Decimal and prefixed integers."""
        value = parse_number(text, self.I32)

        assert value == expected
        assert type(value) is int

    def test_integer_range_not_checked(self) -> None:
        """Out of range values are left for the encoder to report."""
        assert parse_number("99999999999", self.I32) == 99999999999

    def test_integer_format_rejects_float_text(self) -> None:
        """Integer formats do not accept decimal points."""
        with pytest.raises(ValueError, match="not a valid i32 value"):
            parse_number("1.5", self.I32)

    @pytest.mark.parametrize("text, expected", [("1.0", 1.0), ("-0.5", -0.5), ("1e3", 1000.0), ("inf", math.inf)])
    def test_float_literals(self, text: str, expected: float) -> None:
        """Float formats parse floats."""
        assert parse_number(text, self.F64) == expected

    def test_float_format_rejects_words(self) -> None:
        """Non-numbers are rejected with the type name."""
        with pytest.raises(ValueError, match="not a valid f64 value"):
            parse_number("twelve", self.F64)

    def test_blank(self) -> None:
        """Blank input is rejected."""
        with pytest.raises(ValueError, match="not a valid i32 value"):
            parse_number(" ", self.I32)
