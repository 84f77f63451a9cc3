"""Format descriptors for the fixed-width codec.

A format pins down everything an entry point needs to know about its wire
representation: bit width, signedness (integers only) and byte order. The
descriptors are immutable Pydantic models, so an unsupported width or byte
order is rejected when the descriptor is built, long before any value is
encoded.

Example:
    >>> fmt = IntFormat(width=32, signed=True, order="little")
    >>> fmt.type_name, fmt.byte_size, fmt.min_value
    ('i32', 4, -2147483648)
"""

from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict

ByteOrder = Literal["little", "big"]
IntWidth = Literal[8, 16, 32, 64, 128, 256]
FloatWidth = Literal[32, 64]

INT_WIDTHS: Tuple[int, ...] = (8, 16, 32, 64, 128, 256)
FLOAT_WIDTHS: Tuple[int, ...] = (32, 64)
BYTE_ORDERS: Tuple[str, ...] = ("little", "big")


def int_bounds(width: int, signed: bool) -> tuple[int, int]:
    """Return the inclusive (lo, hi) range of a width/signedness pair.

    Ranges:
        Unsigned:        [0, 2^n - 1]
        2's complement:  [-(2^(n-1)), 2^(n-1) - 1]
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    if signed:
        return -(1 << (width - 1)), (1 << (width - 1)) - 1
    return 0, (1 << width) - 1


class _Format(BaseModel):
    model_config = ConfigDict(
        # Descriptors are shared between entry points and threads
        frozen=True,
        strict=True,
        extra="forbid",
    )

    @property
    def byte_size(self) -> int:
        """Number of bytes in the encoded form."""
        return self.width // 8  # type: ignore[attr-defined]


class IntFormat(_Format):
    """Width, signedness and byte order of an integer entry point.

    Attributes:
        width: Bit width, one of 8, 16, 32, 64, 128, 256
        signed: True for two's complement, False for unsigned
        order: "little" or "big"; irrelevant for 8-bit but still recorded
    """

    width: IntWidth
    signed: bool
    order: ByteOrder = "big"

    @property
    def type_name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.width}"

    @property
    def min_value(self) -> int:
        return int_bounds(self.width, self.signed)[0]

    @property
    def max_value(self) -> int:
        return int_bounds(self.width, self.signed)[1]

    def as_unsigned(self) -> IntFormat:
        """Same width and order, unsigned. Used by the signed and float codecs."""
        if not self.signed:
            return self
        return IntFormat(width=self.width, signed=False, order=self.order)


class FloatFormat(_Format):
    """Width and byte order of an IEEE-754 entry point.

    Attributes:
        width: 32 (single precision) or 64 (double precision)
        order: "little" or "big"
    """

    width: FloatWidth
    order: ByteOrder = "big"

    @property
    def type_name(self) -> str:
        return f"f{self.width}"

    def as_unsigned(self) -> IntFormat:
        """Unsigned integer format holding the raw bit pattern."""
        return IntFormat(width=self.width, signed=False, order=self.order)


def parse_type_name(type_name: str, order: str = "big") -> IntFormat | FloatFormat:
    """Build a format from a short type name such as ``"i32"`` or ``"f64"``.

    Args:
        type_name: ``i``/``u``/``f`` followed by the bit width
        order: "little" or "big"

    Returns:
        The matching format descriptor

    Raises:
        ValueError: If the name is not a supported type
    """
    name = type_name.strip().lower()
    if len(name) < 2 or name[0] not in "iuf" or not name[1:].isdigit():
        raise ValueError(f"Unknown type name: {type_name!r}")

    kind, width = name[0], int(name[1:])
    if kind == "f":
        if width not in FLOAT_WIDTHS:
            raise ValueError(f"Unsupported float width {width}; expected one of {FLOAT_WIDTHS}")
        return FloatFormat(width=width, order=order)  # type: ignore[arg-type]

    if width not in INT_WIDTHS:
        raise ValueError(f"Unsupported integer width {width}; expected one of {INT_WIDTHS}")
    return IntFormat(width=width, signed=kind == "i", order=order)  # type: ignore[arg-type]
