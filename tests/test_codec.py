# tests/test_codec.py

import random
from datetime import date

import pytest

from calchina.core.errors import InvalidChineseDateError
from calchina.core.time import absolute_from_date
from calchina.core.types import ChineseDate, DiaryDate, Month
from calchina.diary.codec import DiaryCodec, pack_year, unpack_year

# lunardate covers lunar years 1900..2099; keep clear of the edges
FIRST = absolute_from_date(date(1901, 1, 1))
LAST = absolute_from_date(date(2098, 12, 31))

def test_packing_invariant():
    for cycle in range(1, 11):
        for year in range(1, 61):
            packed = pack_year(cycle, year)
            assert packed // 100 == cycle
            assert packed % 100 == year
            assert unpack_year(packed) == (cycle, year)

def test_pack_drops_leap_flag(codec, absday):
    assert codec.pack(absday(2023, 2, 20)) == DiaryDate(2, 1, 7840)
    assert codec.pack(absday(2023, 3, 22)) == DiaryDate(2, 1, 7840)

def test_pack_new_year(codec, absday):
    assert codec.pack(absday(2024, 2, 10)) == DiaryDate(1, 1, 7841)

def test_leap_roundtrip(codec, absday):
    leap_day = absday(2023, 3, 22)
    d = codec.pack(leap_day)
    assert codec.unpack(d, prefer_leap=True) == leap_day
    assert codec.unpack(d, prefer_leap=False) == absday(2023, 2, 20)

def test_prefer_leap_without_leap_month(codec, absday):
    d = DiaryDate(5, 1, 7840)
    assert codec.unpack(d, prefer_leap=True) == codec.unpack(d, prefer_leap=False)

def test_resolve_month(codec):
    assert codec.resolve_month(78, 40, 2, prefer_leap=True) == Month(2, True)
    assert codec.resolve_month(78, 40, 2, prefer_leap=False) == Month(2)
    assert codec.resolve_month(78, 40, 3, prefer_leap=True) == Month(3)

def test_random_roundtrip(codec, backend):
    random.seed(123)
    for _ in range(2000):
        a = random.randint(FIRST, LAST)
        d = codec.pack(a)
        if backend.from_absolute(a).month.is_leap:
            assert codec.unpack(d, prefer_leap=True) == a
        else:
            assert codec.unpack(d, prefer_leap=False) == a

def test_unpack_date(codec):
    assert codec.unpack_date(DiaryDate(2, 1, 7840), prefer_leap=True) == ChineseDate(78, 40, Month(2, True), 1)

def test_unpack_invalid_dates(codec):
    with pytest.raises(InvalidChineseDateError):
        codec.unpack(DiaryDate(13, 1, 7840))
    with pytest.raises(InvalidChineseDateError):
        codec.unpack(DiaryDate(1, 1, 7800))  # year 0
    with pytest.raises(InvalidChineseDateError):
        codec.unpack(DiaryDate(1, 1, 9901))  # outside the table

class _Boom(Exception):
    pass

class _FailingBackend:
    def leap_months(self, cycle, year):
        return frozenset()

    def to_absolute(self, d):
        raise _Boom(str(d))

def test_backend_errors_propagate_unchanged():
    c = DiaryCodec(_FailingBackend())
    with pytest.raises(_Boom):
        c.unpack(DiaryDate(1, 1, 7841))

def test_callable_forms(codec, absday):
    a = absday(2023, 3, 22)
    d = codec.from_absolute(a)
    assert codec.to_absolute_leap(d) == a
    assert codec.to_absolute(d) == absday(2023, 2, 20)
