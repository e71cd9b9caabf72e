"""
calchina.diary.codec
--------------------
Conversion between astronomical Chinese dates and the month/day/year
shape expected by a generic diary engine.

The diary year packs the cycle and the year within it into one integer,
``cycle * 100 + year``; 7841 is cycle 78, year 41. The diary month is the
plain month number, so a leap month and the regular month sharing its
number look the same once packed. The ambiguity is resolved on the way
back by ``prefer_leap``.
"""

from __future__ import annotations

import logging
from typing import Tuple

from calchina.core.engine import CalendarBackend
from calchina.core.types import ChineseDate, DiaryDate, Month

logger = logging.getLogger(__name__)


def pack_year(cycle: int, year: int) -> int:
    return cycle * 100 + year

def unpack_year(packed_year: int) -> Tuple[int, int]:
    """packed year -> (cycle, year)"""
    return packed_year // 100, packed_year % 100


class DiaryCodec:
    def __init__(self, backend: CalendarBackend):
        self.backend = backend

    def pack(self, absolute_day: int) -> DiaryDate:
        """Absolute day -> diary date. Leap status of the month is not kept."""
        c = self.backend.from_absolute(absolute_day)
        out = DiaryDate(c.month.number, c.day, pack_year(c.cycle, c.year))
        logger.debug("pack %d -> %s (%s)", absolute_day, out, c)
        return out

    def resolve_month(self, cycle: int, year: int, number: int, prefer_leap: bool = False) -> Month:
        """The leap month of that number if preferred and present, else the regular one."""
        if prefer_leap:
            leap = Month(number, True)
            if leap in self.backend.leap_months(cycle, year):
                return leap
        return Month(number)

    def unpack_date(self, d: DiaryDate, prefer_leap: bool = False) -> ChineseDate:
        cycle, year = unpack_year(d.year)
        month = self.resolve_month(cycle, year, d.month, prefer_leap)
        return ChineseDate(cycle, year, month, d.day)

    def unpack(self, d: DiaryDate, prefer_leap: bool = False) -> int:
        """Diary date -> absolute day.

        Errors from the backend for dates that do not exist propagate as-is.
        """
        c = self.unpack_date(d, prefer_leap)
        absolute_day = self.backend.to_absolute(c)
        logger.debug("unpack %s prefer_leap=%s -> %s -> %d", d, prefer_leap, c, absolute_day)
        return absolute_day

    # Callables with the signatures the diary engine expects.
    def from_absolute(self, absolute_day: int) -> DiaryDate:
        return self.pack(absolute_day)

    def to_absolute(self, d: DiaryDate) -> int:
        return self.unpack(d, prefer_leap=False)

    def to_absolute_leap(self, d: DiaryDate) -> int:
        return self.unpack(d, prefer_leap=True)
