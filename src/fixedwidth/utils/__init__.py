"""Utility functions for fixedwidth.

This module provides hex text parsing and formatting.
"""

from __future__ import annotations

from .hexfmt import format_hex, parse_hex_bytes, parse_number

__all__ = [
    "format_hex",
    "parse_hex_bytes",
    "parse_number",
]
