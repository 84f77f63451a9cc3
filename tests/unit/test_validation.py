"""Tests for the shared validation helpers."""

from __future__ import annotations

import math

import pytest

from fixedwidth.exceptions import LengthMismatchError, RangeError, ShapeError
from fixedwidth.formats import IntFormat
from fixedwidth.validation import (
    check_arity,
    check_range,
    coerce_byte_sequence,
    coerce_float,
    coerce_integer,
)


class TestCheckArity:
    """Test the argument count check."""

    def test_single_argument_passes(self) -> None:
        """Exactly one positional argument is accepted."""
        assert check_arity("f", (1,), {}) is None

    @pytest.mark.parametrize("args", [(), (1, 2), (1, 2, 3)])
    def test_wrong_count(self, args: tuple) -> None:
        """Any other count is a shape error."""
        error = check_arity("f", args, {})

        assert isinstance(error, ShapeError)
        assert error.code == "E7001"
        assert f"({len(args)} given)" in error.message

    def test_keyword_arguments(self) -> None:
        """Keyword arguments are a shape error."""
        error = check_arity("f", (1,), {"value": 2})

        assert isinstance(error, ShapeError)
        assert "value" in error.message


class TestCoerceInteger:
    """Test extraction of the integer to encode."""

    def test_int(self) -> None:
        """Ints pass through untouched, however large."""
        assert coerce_integer("f", 1 << 300) == (1 << 300, None)

    @pytest.mark.parametrize("value, expected", [(3.9, 3), (-3.9, -3), (0.0, 0)])
    def test_float_truncates_toward_zero(self, value: float, expected: int) -> None:
        """Floats are truncated toward zero."""
        assert coerce_integer("f", value) == (expected, None)

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_float(self, value: float) -> None:
        """NaN and infinities have no integer value."""
        result, error = coerce_integer("f", value)

        assert result is None
        assert isinstance(error, RangeError)
        assert error.code == "E3022"

    @pytest.mark.parametrize("value", ["12", b"\x01", None, True, [1], 1j])
    def test_wrong_type(self, value: object) -> None:
        """Strings, bytes, bools and the rest are shape errors."""
        result, error = coerce_integer("f", value)

        assert result is None
        assert isinstance(error, ShapeError)
        assert error.code == "E7004"


class TestCoerceFloat:
    """Test extraction of the float to encode."""

    def test_float_and_int(self) -> None:
        """Floats pass through, ints are converted."""
        assert coerce_float("f", 1.5) == (1.5, None)
        assert coerce_float("f", 3) == (3.0, None)

    def test_int_too_large(self) -> None:
        """Ints beyond double range become infinities of the same sign."""
        assert coerce_float("f", 1 << 1100) == (math.inf, None)
        assert coerce_float("f", -(10**400)) == (-math.inf, None)

    @pytest.mark.parametrize("value", ["1.0", None, False])
    def test_wrong_type(self, value: object) -> None:
        """Non-numbers are shape errors."""
        _, error = coerce_float("f", value)

        assert isinstance(error, ShapeError)
        assert error.code == "E7004"


class TestCoerceByteSequence:
    """Test decoder input handling."""

    @pytest.mark.parametrize("value", [b"\x01\x02", bytearray(b"\x01\x02"), memoryview(b"\x01\x02"), [1, 2], (1, 2)])
    def test_accepted_inputs(self, value: object) -> None:
        """Bytes-like objects and int sequences become bytes."""
        assert coerce_byte_sequence("f", value, 2) == (b"\x01\x02", None)

    @pytest.mark.parametrize("value", [b"\x01", [1, 2, 3], []])
    def test_wrong_length(self, value: object) -> None:
        """Any other length is a length mismatch."""
        result, error = coerce_byte_sequence("f", value, 2)

        assert result is None
        assert isinstance(error, LengthMismatchError)
        assert error.code == "E7010"
        assert "exactly 2 bytes" in error.message

    def test_length_checked_before_elements(self) -> None:
        """A wrong-length list of junk is reported as a length error."""
        _, error = coerce_byte_sequence("f", ["a", "b", "c"], 2)

        assert isinstance(error, LengthMismatchError)

    def test_element_out_of_range(self) -> None:
        """Elements must be 0..255."""
        _, error = coerce_byte_sequence("f", [0, 256], 2)

        assert isinstance(error, RangeError)
        assert error.code == "E3022"
        assert "index 1" in error.message

    @pytest.mark.parametrize("value", [[0, "1"], [0, 1.0], [True, 0]])
    def test_element_wrong_type(self, value: list) -> None:
        """Elements must be ints."""
        _, error = coerce_byte_sequence("f", value, 2)

        assert isinstance(error, ShapeError)
        assert error.code == "E7002"

    @pytest.mark.parametrize("value", ["0102", 258, None, {1: 2, 3: 4}])
    def test_not_a_sequence(self, value: object) -> None:
        """Strings, numbers and mappings are shape errors."""
        _, error = coerce_byte_sequence("f", value, 2)

        assert isinstance(error, ShapeError)
        assert error.code == "E7002"


class TestCheckRange:
    """Test range validation."""

    def test_bounds_inclusive(self) -> None:
        """Both bounds are representable."""
        fmt = IntFormat(width=8, signed=True)
        assert check_range("f", -128, fmt) is None
        assert check_range("f", 127, fmt) is None

    @pytest.mark.parametrize("value", [-129, 128])
    def test_one_past_either_bound(self, value: int) -> None:
        """One unit beyond either bound fails."""
        error = check_range("encode_i8", value, IntFormat(width=8, signed=True))

        assert isinstance(error, RangeError)
        assert error.message == f"encode_i8() value {value} out of i8 range (-128 to 127)"
