"""Type description CLI command."""

from __future__ import annotations

from ..builtins import BINARY_BUILTINS
from ..formats import FloatFormat, IntFormat, parse_type_name


def describe_type(type_name: str) -> None:
    """Print the wire layout of a type and every entry point that handles it.

    Args:
        type_name: Short type name such as ``i32`` or ``f64``

    Raises:
        ValueError: If the type name is not supported
    """
    fmt = parse_type_name(type_name)

    print(f"{'=' * 19} {fmt.type_name} {'=' * 19}")
    print(f"Encoded size: {fmt.byte_size} bytes / {fmt.width} bits")

    if isinstance(fmt, IntFormat):
        kind = "two's complement" if fmt.signed else "unsigned"
        print(f"Representation: {kind} integer")
        print(f"Minimum: {fmt.min_value}")
        print(f"Maximum: {fmt.max_value}")
    elif isinstance(fmt, FloatFormat):
        precision = "single" if fmt.width == 32 else "double"
        print(f"Representation: IEEE-754 {precision} precision")

    print()
    print(f"{'-' * 20} Entry points {'-' * 20}")
    for name, entry_point in BINARY_BUILTINS.items():
        if entry_point.type_name == fmt.type_name:
            print(f"        {name}")
    print()
