"""Basic fixedwidth usage.

Encodes a handful of values at different widths and byte orders, shows how
errors come back as values, and decodes everything again.
"""

from __future__ import annotations

from fixedwidth import (
    decode_f32_from_little_endian,
    decode_i32_from_little_endian,
    decode_u128_from_big_endian,
    encode_f32_to_little_endian,
    encode_i8,
    encode_i32_to_big_endian,
    encode_i32_to_little_endian,
    encode_u128_to_big_endian,
    find_codec,
)
from fixedwidth.utils import format_hex


def main() -> None:
    print("=" * 60)
    print("fixedwidth: Basic Usage Example")
    print("=" * 60)

    # Same value, both byte orders
    little, _ = encode_i32_to_little_endian(12345)
    big, _ = encode_i32_to_big_endian(12345)
    print(f"\n12345 as i32 LE: {format_hex(little)}")
    print(f"12345 as i32 BE: {format_hex(big)}")
    print(f"Decoded LE: {decode_i32_from_little_endian(little).value}")

    # Two's complement beyond native word sizes
    data, _ = encode_u128_to_big_endian(2**127 + 1)
    print(f"\n2^127 + 1 as u128 BE: {format_hex(data)}")
    print(f"Decoded: {decode_u128_from_big_endian(data).value}")

    # Floats are rounded to the requested precision
    data, _ = encode_f32_to_little_endian(0.1)
    print(f"\n0.1 as f32 LE: {format_hex(data)} -> {decode_f32_from_little_endian(data).value!r}")

    # Errors are returned, not raised
    print("\nOut of range:")
    for value in (127, 128, -128, -129):
        data, error = encode_i8(value)
        if error is not None:
            print(f"  encode_i8({value}) -> {error}")
        else:
            print(f"  encode_i8({value}) -> {format_hex(data)}")

    # Look entry points up by type name
    encode, decode = find_codec("i256", "little")
    data, _ = encode(-1)
    print(f"\n{encode.name}(-1) -> {len(data)} bytes, decodes to {decode(data).value}")


if __name__ == "__main__":
    main()
