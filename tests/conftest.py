from __future__ import annotations

from datetime import date

import pytest

import calchina
from calchina.core.time import absolute_from_date


@pytest.fixture
def backend():
    return calchina.get_backend("lunardate")

@pytest.fixture
def codec(backend):
    return calchina.DiaryCodec(backend)

@pytest.fixture
def absday():
    """Shorthand: absday(2023, 3, 22) -> absolute day number."""
    def _absday(y: int, m: int, d: int) -> int:
        return absolute_from_date(date(y, m, d))
    return _absday
