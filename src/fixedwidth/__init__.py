"""fixedwidth: Fixed-Width Binary Codec

Converts Python numbers to fixed-size byte sequences and back:

- signed and unsigned integers of 8, 16, 32, 64, 128 and 256 bits
- IEEE-754 single and double precision floats
- little-endian and big-endian byte order

Every entry point takes exactly one argument and returns a ``(value, error)``
pair instead of raising, so callers branch on the error slot:

    >>> from fixedwidth import encode_i32_to_little_endian, decode_i32_from_little_endian
    >>> data, err = encode_i32_to_little_endian(2147483647)
    >>> data.hex(), err
    ('ffffff7f', None)
    >>> decode_i32_from_little_endian(data)
    Result(value=2147483647, error=None)
    >>> encode_i32_to_little_endian(2**31).error.code
    'E3022'
"""

from __future__ import annotations

from .builtins import *  # noqa: F401,F403
from .builtins import __all__ as _builtin_names
from .dispatch import EntryPoint, Result
from .exceptions import (
    FixedWidthError,
    LengthMismatchError,
    RangeError,
    ShapeError,
)
from .formats import FloatFormat, IntFormat, int_bounds, parse_type_name

__version__ = "0.1.0"

__all__ = [
    # Results
    "Result",
    "EntryPoint",
    # Formats
    "IntFormat",
    "FloatFormat",
    "int_bounds",
    "parse_type_name",
    # Exceptions
    "FixedWidthError",
    "ShapeError",
    "RangeError",
    "LengthMismatchError",
    # Version
    "__version__",
] + list(_builtin_names)
