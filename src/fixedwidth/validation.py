"""Shared validation helpers for the fixed-width entry points.

Every helper returns a ``(value, error)`` pair where exactly one side is
None. Nothing here raises for bad input: the entry points forward the error
to their caller unchanged.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Sequence, Tuple, TypeVar

from .exceptions import (
    ARITY_CODE,
    LENGTH_CODE,
    NOT_BYTES_CODE,
    NOT_NUMBER_CODE,
    RANGE_CODE,
    FixedWidthError,
    LengthMismatchError,
    RangeError,
    ShapeError,
)
from .formats import IntFormat

T = TypeVar("T")
Checked = Tuple[Optional[T], Optional[FixedWidthError]]

_BYTES_LIKE = (bytes, bytearray, memoryview)


def check_arity(name: str, args: Sequence[Any], kwargs: Mapping[str, Any]) -> Optional[ShapeError]:
    """Require exactly one positional argument and no keyword arguments."""
    if kwargs:
        names = ", ".join(sorted(kwargs))
        return ShapeError(ARITY_CODE, f"{name}() takes no keyword arguments (got {names})")
    if len(args) != 1:
        return ShapeError(ARITY_CODE, f"{name}() takes exactly 1 argument ({len(args)} given)")
    return None


def coerce_integer(name: str, arg: Any) -> Checked[int]:
    """Extract the integer to encode from ``arg``.

    ``int`` is taken as is. A ``float`` is truncated toward zero; a NaN or
    infinity has no integer value and is reported as out of range.
    """
    if isinstance(arg, bool):
        return None, ShapeError(NOT_NUMBER_CODE, f"{name}() requires an integer argument, got bool")
    if isinstance(arg, int):
        return arg, None
    if isinstance(arg, float):
        if not math.isfinite(arg):
            return None, RangeError(RANGE_CODE, f"{name}() cannot encode non-finite value {arg}")
        return int(arg), None
    return None, ShapeError(
        NOT_NUMBER_CODE, f"{name}() requires an integer argument, got {type(arg).__name__}"
    )


def coerce_float(name: str, arg: Any) -> Checked[float]:
    """Extract the float to encode from ``arg`` (``float`` or ``int``).

    An ``int`` beyond double range becomes an infinity of the same sign,
    matching what single precision does with an out of range double.
    """
    if isinstance(arg, bool):
        return None, ShapeError(NOT_NUMBER_CODE, f"{name}() requires a float or integer argument, got bool")
    if isinstance(arg, float):
        return arg, None
    if isinstance(arg, int):
        try:
            return float(arg), None
        except OverflowError:
            return (math.inf if arg > 0 else -math.inf), None
    return None, ShapeError(
        NOT_NUMBER_CODE, f"{name}() requires a float or integer argument, got {type(arg).__name__}"
    )


def coerce_byte_sequence(name: str, arg: Any, expected: int) -> Checked[bytes]:
    """Turn ``arg`` into exactly ``expected`` bytes.

    Accepts bytes-like objects and lists/tuples of ints in 0..255. The
    length is checked before the elements, so a wrong-length list of junk is
    a length error.
    """
    items: Sequence[Any]
    if isinstance(arg, _BYTES_LIKE):
        items = bytes(arg)
    elif isinstance(arg, (list, tuple)):
        items = arg
    else:
        return None, ShapeError(
            NOT_BYTES_CODE, f"{name}() requires a byte sequence argument, got {type(arg).__name__}"
        )

    if len(items) != expected:
        return None, LengthMismatchError(
            LENGTH_CODE, f"{name}() requires exactly {expected} bytes, got {len(items)}"
        )

    if isinstance(items, bytes):
        return items, None

    for i, element in enumerate(items):
        if isinstance(element, bool) or not isinstance(element, int):
            return None, ShapeError(
                NOT_BYTES_CODE,
                f"{name}() requires a byte sequence, element {i} is {type(element).__name__}",
            )
        if not 0 <= element <= 255:
            return None, RangeError(
                RANGE_CODE, f"{name}() byte at index {i} out of range (0-255): {element}"
            )
    return bytes(items), None


def check_range(name: str, value: int, fmt: IntFormat) -> Optional[RangeError]:
    """Require ``fmt.min_value <= value <= fmt.max_value``."""
    lo, hi = fmt.min_value, fmt.max_value
    if value < lo or value > hi:
        return RangeError(
            RANGE_CODE, f"{name}() value {value} out of {fmt.type_name} range ({lo} to {hi})"
        )
    return None
