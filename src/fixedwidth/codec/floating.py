"""IEEE-754 floating-point codec.

A float is first turned into its raw bit pattern (an unsigned integer of the
same width) and that pattern is then serialized with the unsigned integer
codec, so both byte orders share one code path.

>>> fmt = FloatFormat(width=32, order="big")
>>> encode_float(1.0, fmt).hex()
'3f800000'
>>> decode_float(bytes.fromhex('3f800000'), fmt)
1.0
"""

from __future__ import annotations

import math
import struct

from ..formats import FloatFormat
from .unsigned import decode_unsigned, encode_unsigned

# Native-order-independent packing of the bit pattern
_STRUCT_FORMATS = {32: (">f", ">I"), 64: (">d", ">Q")}


def float_to_bits(value: float, width: int) -> int:
    """Return the IEEE-754 bit pattern of ``value``.

    At 32 bits the value is rounded to single precision. A finite value that
    rounds past the largest single becomes an infinity of the same sign.
    """
    float_fmt, uint_fmt = _STRUCT_FORMATS[width]
    try:
        packed = struct.pack(float_fmt, value)
    except OverflowError:
        packed = struct.pack(float_fmt, math.copysign(math.inf, value))
    return struct.unpack(uint_fmt, packed)[0]


def bits_to_float(bits: int, width: int) -> float:
    """Reinterpret an unsigned ``bits`` pattern as an IEEE-754 float."""
    float_fmt, uint_fmt = _STRUCT_FORMATS[width]
    return struct.unpack(float_fmt, struct.pack(uint_fmt, bits))[0]


def encode_float(value: float, fmt: FloatFormat) -> bytes:
    """Encode ``value`` as ``fmt.byte_size`` bytes in ``fmt.order``."""
    return encode_unsigned(float_to_bits(value, fmt.width), fmt.as_unsigned())


def decode_float(data: bytes, fmt: FloatFormat) -> float:
    """Decode ``fmt.byte_size`` bytes into a float.

    Infinities and the largest finite values come back exactly. NaN comes
    back as NaN, payload bits are not guaranteed.
    """
    return bits_to_float(decode_unsigned(data, fmt.as_unsigned()), fmt.width)
