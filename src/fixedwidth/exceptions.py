"""Error taxonomy for fixedwidth.

The codec never raises these: every entry point returns them as the second
half of a ``(value, error)`` result. They still derive from Exception so a
caller that prefers raising can simply ``raise result.error``.

All errors inherit from FixedWidthError and carry a short ``code`` that
identifies the failure independently of the message text.
"""

from __future__ import annotations

# Argument count is wrong
ARITY_CODE = "E7001"
# Decode argument is not a byte sequence
NOT_BYTES_CODE = "E7002"
# Encode argument is not a number
NOT_NUMBER_CODE = "E7004"
# Decode argument has the wrong number of bytes
LENGTH_CODE = "E7010"
# Value or byte element outside the representable range
RANGE_CODE = "E3022"


class FixedWidthError(Exception):
    """Base class for all fixedwidth errors."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


class ShapeError(FixedWidthError):
    """The call itself is malformed.

    Examples:
        - Zero or several arguments where exactly one is expected
        - Keyword arguments
        - A string passed where a number or byte sequence is expected
        - A byte sequence containing non-integer elements
    """

    pass


class RangeError(FixedWidthError):
    """A value cannot be represented at the requested width.

    Examples:
        - ``encode_u8(256)`` or ``encode_i8(-129)``
        - A byte element outside 0..255 in a list passed to a decoder
        - A non-finite float passed to an integer encoder
    """

    pass


class LengthMismatchError(FixedWidthError):
    """A decoder received a byte sequence whose length is not ``width // 8``."""

    pass
