"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from fixedwidth.formats import BYTE_ORDERS, INT_WIDTHS, IntFormat


@pytest.fixture(params=[(w, s) for w in INT_WIDTHS for s in (False, True)], ids=lambda p: f"{'i' if p[1] else 'u'}{p[0]}")
def width_and_signed(request: pytest.FixtureRequest) -> tuple[int, bool]:
    """Every integer width/signedness pair."""
    return request.param


@pytest.fixture(params=BYTE_ORDERS)
def order(request: pytest.FixtureRequest) -> str:
    """Both byte orders."""
    return request.param


@pytest.fixture
def int_format(width_and_signed: tuple[int, bool], order: str) -> IntFormat:
    """Every integer format (width x signedness x byte order)."""
    width, signed = width_and_signed
    return IntFormat(width=width, signed=signed, order=order)
