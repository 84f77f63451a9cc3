"""Parameterised entry points for the fixed-width codec.

Every public function in fixedwidth.builtins is an instance of one of the
four classes below, built from a name and a format descriptor. The classes
own the call protocol shared by all of them:

1. exactly one positional argument (ShapeError otherwise)
2. argument type (ShapeError otherwise)
3. range or exact length (RangeError / LengthMismatchError otherwise)
4. the codec itself, which cannot fail on validated input

Results are always a ``Result(value, error)`` pair. Nothing is raised.

Example:
    >>> encode = IntegerEncoder("encode_i16_to_big_endian", IntFormat(width=16, signed=True, order="big"))
    >>> encode(-2)
    Result(value=b'\\xff\\xfe', error=None)
    >>> encode(1 << 20).error.code
    'E3022'
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Union, cast

from .codec import decode_float, decode_signed, decode_unsigned, encode_float, encode_signed, encode_unsigned
from .exceptions import FixedWidthError
from .formats import FloatFormat, IntFormat
from .log import get_logger
from .validation import check_arity, check_range, coerce_byte_sequence, coerce_float, coerce_integer

logger = get_logger(__name__)

_ORDER_WORDS = {"little": "little-endian", "big": "big-endian"}


class Result(NamedTuple):
    """Outcome of an entry point call.

    Attributes:
        value: Encoded bytes or decoded number; None when ``error`` is set
        error: None on success
    """

    value: Any
    error: Optional[FixedWidthError]

    @property
    def ok(self) -> bool:
        return self.error is None


class EntryPoint:
    """Common plumbing for the four entry point kinds."""

    fmt: Union[IntFormat, FloatFormat]

    def __init__(self, name: str, fmt: Union[IntFormat, FloatFormat]) -> None:
        self.name = name
        self.fmt = fmt
        self.__name__ = name
        self.__qualname__ = name
        self.__doc__ = self._describe()
        self.log = logger.new(entry_point=name)

    @property
    def type_name(self) -> str:
        return self.fmt.type_name

    def _describe(self) -> str:
        raise NotImplementedError

    def _byte_order_words(self) -> str:
        if self.fmt.width == 8:
            return ""
        return f" {_ORDER_WORDS[self.fmt.order]}"

    def _fail(self, error: FixedWidthError) -> Result:
        self.log.debug("call rejected", code=error.code, error=error.message)
        return Result(None, error)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} ({self.type_name}, {self.fmt.order})>"


class IntegerEncoder(EntryPoint):
    fmt: IntFormat

    def _describe(self) -> str:
        return (
            f"Encode {self.type_name} value as {self.fmt.byte_size}{self._byte_order_words()} bytes.\n\n"
            f"Returns ``Result(bytes, None)`` or ``Result(None, error)``."
        )

    def __call__(self, *args: Any, **kwargs: Any) -> Result:
        error = check_arity(self.name, args, kwargs)
        if error is not None:
            return self._fail(error)

        checked, error = coerce_integer(self.name, args[0])
        if error is not None:
            return self._fail(error)
        value = cast(int, checked)

        error = check_range(self.name, value, self.fmt)
        if error is not None:
            return self._fail(error)

        if self.fmt.signed:
            return Result(encode_signed(value, self.fmt), None)
        return Result(encode_unsigned(value, self.fmt), None)


class IntegerDecoder(EntryPoint):
    fmt: IntFormat

    def _describe(self) -> str:
        return (
            f"Decode {self.fmt.byte_size}{self._byte_order_words()} bytes into {self.type_name} value.\n\n"
            f"Returns ``Result(int, None)`` or ``Result(None, error)``."
        )

    def __call__(self, *args: Any, **kwargs: Any) -> Result:
        error = check_arity(self.name, args, kwargs)
        if error is not None:
            return self._fail(error)

        data, error = coerce_byte_sequence(self.name, args[0], self.fmt.byte_size)
        if error is not None:
            return self._fail(error)
        raw = cast(bytes, data)

        if self.fmt.signed:
            return Result(decode_signed(raw, self.fmt), None)
        return Result(decode_unsigned(raw, self.fmt), None)


class FloatEncoder(EntryPoint):
    fmt: FloatFormat

    def _describe(self) -> str:
        return (
            f"Encode a float as {self.fmt.byte_size}{self._byte_order_words()} IEEE-754 bytes ({self.type_name}).\n\n"
            f"Returns ``Result(bytes, None)`` or ``Result(None, error)``."
        )

    def __call__(self, *args: Any, **kwargs: Any) -> Result:
        error = check_arity(self.name, args, kwargs)
        if error is not None:
            return self._fail(error)

        value, error = coerce_float(self.name, args[0])
        if error is not None:
            return self._fail(error)

        return Result(encode_float(cast(float, value), self.fmt), None)


class FloatDecoder(EntryPoint):
    fmt: FloatFormat

    def _describe(self) -> str:
        return (
            f"Decode {self.fmt.byte_size}{self._byte_order_words()} IEEE-754 bytes ({self.type_name}) into a float.\n\n"
            f"Returns ``Result(float, None)`` or ``Result(None, error)``."
        )

    def __call__(self, *args: Any, **kwargs: Any) -> Result:
        error = check_arity(self.name, args, kwargs)
        if error is not None:
            return self._fail(error)

        data, error = coerce_byte_sequence(self.name, args[0], self.fmt.byte_size)
        if error is not None:
            return self._fail(error)

        return Result(decode_float(cast(bytes, data), self.fmt), None)
