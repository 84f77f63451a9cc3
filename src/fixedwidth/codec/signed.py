"""Signed (two's complement) integer codec.

Negative values are mapped onto their unsigned representative by adding
``2**width`` and then handed to the unsigned codec. Decoding reverses the
mapping when the sign bit is set. The conversion is plain integer addition
and subtraction, never bitwise NOT+1, so it holds at every width.

>>> to_twos_complement(-1, 32)
4294967295
>>> from_twos_complement(0x80, 8)
-128
"""

from __future__ import annotations

from ..formats import IntFormat
from .unsigned import decode_unsigned, encode_unsigned


def to_twos_complement(value: int, width: int) -> int:
    """Return the unsigned representative of ``value`` at ``width`` bits."""
    if value < 0:
        return value + (1 << width)
    return value


def from_twos_complement(magnitude: int, width: int) -> int:
    """Reinterpret an unsigned ``magnitude`` as a signed value."""
    if magnitude < (1 << (width - 1)):
        return magnitude
    # Sign bit set
    return magnitude - (1 << width)


def encode_signed(value: int, fmt: IntFormat) -> bytes:
    """Encode ``-2**(w-1) <= value < 2**(w-1)`` in two's complement.

    Args:
        value: Integer already checked against the format range
        fmt: Target format

    Returns:
        ``fmt.byte_size`` bytes
    """
    return encode_unsigned(to_twos_complement(value, fmt.width), fmt.as_unsigned())


def decode_signed(data: bytes, fmt: IntFormat) -> int:
    """Decode a two's complement value.

    Every bit pattern of the right length maps to exactly one value, so
    this cannot fail once the length is right.
    """
    magnitude = decode_unsigned(data, fmt.as_unsigned())
    return from_twos_complement(magnitude, fmt.width)
