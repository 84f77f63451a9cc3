"""Unsigned integer codec.

Converts a non-negative Python int to exactly ``fmt.byte_size`` bytes and
back. Python ints are arbitrary precision, so the same code path serves
8-bit and 256-bit widths alike.

Both functions trust their caller: range and length checks live in
fixedwidth.validation and run before these are reached.

>>> fmt = IntFormat(width=32, signed=False, order="big")
>>> encode_unsigned(12345, fmt).hex()
'00003039'
>>> decode_unsigned(bytes.fromhex('00003039'), fmt)
12345
"""

from __future__ import annotations

from ..formats import IntFormat


def encode_unsigned(value: int, fmt: IntFormat) -> bytes:
    """Encode ``0 <= value < 2**fmt.width`` as base-256 digits.

    Args:
        value: Non-negative integer already checked against the format range
        fmt: Target format (signedness is ignored here)

    Returns:
        ``fmt.byte_size`` bytes, least-significant first for little-endian
    """
    digits = bytearray(fmt.byte_size)
    remaining = value
    for i in range(fmt.byte_size):
        digits[i] = remaining & 0xFF
        remaining >>= 8

    # digits are least-significant first
    if fmt.order == "big":
        digits.reverse()
    return bytes(digits)


def decode_unsigned(data: bytes, fmt: IntFormat) -> int:
    """Reassemble the magnitude held by ``data``.

    Args:
        data: Exactly ``fmt.byte_size`` bytes
        fmt: Source format (signedness is ignored here)

    Returns:
        Integer in ``[0, 2**fmt.width)``
    """
    ordered = data if fmt.order == "little" else data[::-1]

    value = 0
    for i, byte in enumerate(ordered):
        value += byte << (8 * i)
    return value
