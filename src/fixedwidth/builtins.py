"""Public fixed-width entry points.

Each name below is a ready-made entry point: call it with exactly one
argument and unpack the ``(value, error)`` result.

    >>> data, err = encode_i32_to_little_endian(-1)
    >>> data.hex(), err
    ('ffffffff', None)
    >>> value, err = decode_u8([0x100])
    >>> value, err.code
    (None, 'E3022')

8-bit values have no byte order, so ``encode_i8``/``decode_i8`` and
``encode_u8``/``decode_u8`` are provided alongside the ``_little_endian`` and
``_big_endian`` spellings, which produce identical bytes.

BINARY_BUILTINS maps the qualified ``binary.<name>`` of every entry point to
the entry point itself, for callers that dispatch by name.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from .dispatch import EntryPoint, FloatDecoder, FloatEncoder, IntegerDecoder, IntegerEncoder
from .formats import FloatFormat, IntFormat, parse_type_name

NAMESPACE = "binary"

Encoder = Union[IntegerEncoder, FloatEncoder]
Decoder = Union[IntegerDecoder, FloatDecoder]


def _encoder(type_name: str, order: Optional[str] = None) -> Encoder:
    fmt = parse_type_name(type_name, order or "big")
    name = f"encode_{type_name}" if order is None else f"encode_{type_name}_to_{order}_endian"
    if isinstance(fmt, FloatFormat):
        return FloatEncoder(name, fmt)
    return IntegerEncoder(name, fmt)


def _decoder(type_name: str, order: Optional[str] = None) -> Decoder:
    fmt = parse_type_name(type_name, order or "big")
    name = f"decode_{type_name}" if order is None else f"decode_{type_name}_from_{order}_endian"
    if isinstance(fmt, FloatFormat):
        return FloatDecoder(name, fmt)
    return IntegerDecoder(name, fmt)


# ============================================================================
# 8-bit (no byte order)
# ============================================================================

encode_i8 = _encoder("i8")
decode_i8 = _decoder("i8")
encode_u8 = _encoder("u8")
decode_u8 = _decoder("u8")

# ============================================================================
# 8-bit integers
# ============================================================================

encode_i8_to_little_endian = _encoder("i8", "little")
decode_i8_from_little_endian = _decoder("i8", "little")
encode_u8_to_little_endian = _encoder("u8", "little")
decode_u8_from_little_endian = _decoder("u8", "little")
encode_i8_to_big_endian = _encoder("i8", "big")
decode_i8_from_big_endian = _decoder("i8", "big")
encode_u8_to_big_endian = _encoder("u8", "big")
decode_u8_from_big_endian = _decoder("u8", "big")

# ============================================================================
# 16-bit integers
# ============================================================================

encode_i16_to_little_endian = _encoder("i16", "little")
decode_i16_from_little_endian = _decoder("i16", "little")
encode_u16_to_little_endian = _encoder("u16", "little")
decode_u16_from_little_endian = _decoder("u16", "little")
encode_i16_to_big_endian = _encoder("i16", "big")
decode_i16_from_big_endian = _decoder("i16", "big")
encode_u16_to_big_endian = _encoder("u16", "big")
decode_u16_from_big_endian = _decoder("u16", "big")

# ============================================================================
# 32-bit integers
# ============================================================================

encode_i32_to_little_endian = _encoder("i32", "little")
decode_i32_from_little_endian = _decoder("i32", "little")
encode_u32_to_little_endian = _encoder("u32", "little")
decode_u32_from_little_endian = _decoder("u32", "little")
encode_i32_to_big_endian = _encoder("i32", "big")
decode_i32_from_big_endian = _decoder("i32", "big")
encode_u32_to_big_endian = _encoder("u32", "big")
decode_u32_from_big_endian = _decoder("u32", "big")

# ============================================================================
# 64-bit integers
# ============================================================================

encode_i64_to_little_endian = _encoder("i64", "little")
decode_i64_from_little_endian = _decoder("i64", "little")
encode_u64_to_little_endian = _encoder("u64", "little")
decode_u64_from_little_endian = _decoder("u64", "little")
encode_i64_to_big_endian = _encoder("i64", "big")
decode_i64_from_big_endian = _decoder("i64", "big")
encode_u64_to_big_endian = _encoder("u64", "big")
decode_u64_from_big_endian = _decoder("u64", "big")

# ============================================================================
# 128-bit integers
# ============================================================================

encode_i128_to_little_endian = _encoder("i128", "little")
decode_i128_from_little_endian = _decoder("i128", "little")
encode_u128_to_little_endian = _encoder("u128", "little")
decode_u128_from_little_endian = _decoder("u128", "little")
encode_i128_to_big_endian = _encoder("i128", "big")
decode_i128_from_big_endian = _decoder("i128", "big")
encode_u128_to_big_endian = _encoder("u128", "big")
decode_u128_from_big_endian = _decoder("u128", "big")

# ============================================================================
# 256-bit integers
# ============================================================================

encode_i256_to_little_endian = _encoder("i256", "little")
decode_i256_from_little_endian = _decoder("i256", "little")
encode_u256_to_little_endian = _encoder("u256", "little")
decode_u256_from_little_endian = _decoder("u256", "little")
encode_i256_to_big_endian = _encoder("i256", "big")
decode_i256_from_big_endian = _decoder("i256", "big")
encode_u256_to_big_endian = _encoder("u256", "big")
decode_u256_from_big_endian = _decoder("u256", "big")

# ============================================================================
# IEEE-754 floats
# ============================================================================

encode_f32_to_little_endian = _encoder("f32", "little")
decode_f32_from_little_endian = _decoder("f32", "little")
encode_f32_to_big_endian = _encoder("f32", "big")
decode_f32_from_big_endian = _decoder("f32", "big")
encode_f64_to_little_endian = _encoder("f64", "little")
decode_f64_from_little_endian = _decoder("f64", "little")
encode_f64_to_big_endian = _encoder("f64", "big")
decode_f64_from_big_endian = _decoder("f64", "big")


BINARY_BUILTINS: Dict[str, EntryPoint] = {
    f"{NAMESPACE}.{obj.name}": obj for obj in list(globals().values()) if isinstance(obj, EntryPoint)
}


def get_builtin(name: str) -> EntryPoint:
    """Look up an entry point by bare (``encode_u8``) or qualified (``binary.encode_u8``) name.

    Raises:
        KeyError: If no entry point has that name
    """
    key = name if name.startswith(f"{NAMESPACE}.") else f"{NAMESPACE}.{name}"
    try:
        return BINARY_BUILTINS[key]
    except KeyError:
        raise KeyError(f"Unknown entry point: {name}") from None


def find_codec(type_name: str, order: str = "big") -> tuple[Encoder, Decoder]:
    """Return the (encoder, decoder) pair for a short type name and byte order.

    Example:
        >>> encode, decode = find_codec("u16", "little")
        >>> encode.name
        'encode_u16_to_little_endian'
    """
    fmt: Union[IntFormat, FloatFormat] = parse_type_name(type_name, order)
    suffix = f"{fmt.type_name}_{{}}_{fmt.order}_endian"
    encoder = get_builtin(f"encode_{suffix.format('to')}")
    decoder = get_builtin(f"decode_{suffix.format('from')}")
    return encoder, decoder  # type: ignore[return-value]


__all__ = ["BINARY_BUILTINS", "NAMESPACE", "find_codec", "get_builtin"] + sorted(
    obj.name for obj in BINARY_BUILTINS.values()
)
