"""Text helpers for the command line tool.

The ``encode`` command reads a number and prints bytes, ``decode`` reads
bytes and prints a number. Both directions of that text conversion live
here so the CLI module only wires arguments to entry points.

Example:
    >>> parse_hex_bytes("0x30,0x39")
    b'09'
    >>> format_hex(b"\\x30\\x39")
    '30 39'
"""

from __future__ import annotations

import re
from typing import Iterable, Union

from ..formats import FloatFormat, IntFormat

# Anything between byte groups: blanks, commas, colons, underscores
_GROUP_SEPARATOR = re.compile(r"[\s,:_]+")
_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


def parse_hex_bytes(text: str) -> bytes:
    """Read the byte argument of ``fixedwidth decode``.

    The text is split into groups on blanks, commas, colons or underscores.
    Each group may start with ``0x`` and holds one or more whole bytes, so
    ``"30 39"``, ``"3039"`` and ``"0x30,0x39"`` are the same input. A group of
    a single digit is one byte (``"F"`` is ``0F``).

    The byte count is not checked here: the decoder reports a wrong length
    with its own error code.

    Raises:
        ValueError: If a group is not a whole number of hex bytes
    """
    data = bytearray()
    for group in _GROUP_SEPARATOR.split(text.strip()):
        if not group:
            continue
        digits = group[2:] if group[:2].lower() == "0x" else group
        if len(digits) == 1:
            digits = "0" + digits
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"{group!r} is not hex")
        if len(digits) % 2:
            raise ValueError(f"{group!r} has an odd number of hex digits")
        data += bytes.fromhex(digits)
    return bytes(data)


def format_hex(data: Iterable[int]) -> str:
    """Render bytes as upper-case, space separated pairs ("FF FF FF 7F")."""
    return " ".join(f"{b:02X}" for b in data)


def parse_number(text: str, fmt: Union[IntFormat, FloatFormat]) -> Union[int, float]:
    """Read the value argument of ``fixedwidth encode`` for ``fmt``.

    Integer formats take decimal or ``0x``/``0b``/``0o`` literals with
    optional ``_`` grouping. Float formats take anything ``float()`` does,
    including ``inf`` and ``nan``. Range is left to the encoder.

    Raises:
        ValueError: If the text is not a number of the format's kind
    """
    s = text.strip()
    if isinstance(fmt, FloatFormat):
        try:
            return float(s)
        except ValueError:
            raise ValueError(f"{text!r} is not a valid {fmt.type_name} value") from None
    try:
        return int(s, 0)
    except ValueError:
        raise ValueError(
            f"{text!r} is not a valid {fmt.type_name} value (decimal, 0x, 0b or 0o integer)"
        ) from None
