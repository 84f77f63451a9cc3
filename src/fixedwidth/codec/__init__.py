"""Fixed-width codecs for fixedwidth.

These functions do the bit-level work and assume validated input. Public
callers should go through the entry points in fixedwidth.builtins, which
validate first and report failures as ``(value, error)`` results.
"""

from __future__ import annotations

from .floating import bits_to_float, decode_float, encode_float, float_to_bits
from .signed import decode_signed, encode_signed, from_twos_complement, to_twos_complement
from .unsigned import decode_unsigned, encode_unsigned

__all__ = [
    "encode_unsigned",
    "decode_unsigned",
    "encode_signed",
    "decode_signed",
    "to_twos_complement",
    "from_twos_complement",
    "encode_float",
    "decode_float",
    "float_to_bits",
    "bits_to_float",
]
