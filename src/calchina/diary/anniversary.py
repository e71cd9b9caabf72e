"""
calchina.diary.anniversary
--------------------------
Anniversaries of Chinese-dated events.
"""

from __future__ import annotations

from typing import Optional

from calchina.core.engine import CalendarBackend
from calchina.core.types import AnniversaryMatch, DiaryDate
from .codec import DiaryCodec

# Reported for an anniversary with no starting year. It counts nothing;
# it only keeps "elapsed > 0" true so the entry recurs every year.
RECURRING_DIFFERENCE = 100


def anniversary_difference(
    backend: CalendarBackend,
    month: int,
    day: int,
    year: Optional[int],
    absolute_day: int,
) -> Optional[AnniversaryMatch]:
    """
    Chinese years elapsed since month/day/year (packed year) if ``absolute_day``
    falls on its anniversary, else None.

    The month matches on its number, so an event in a leap month recurs in
    the regular month of the same number and vice versa.
    """
    target = None
    if year is not None:
        # round trip through the backend; a target that is no real date raises
        target = backend.from_absolute(DiaryCodec(backend).unpack(DiaryDate(month, day, year)))

    current = backend.from_absolute(absolute_day)
    if current.month.number != month or current.day != day:
        return None

    if target is None:
        return AnniversaryMatch(RECURRING_DIFFERENCE, recurring=True)

    elapsed = current.cycle_year - target.cycle_year
    if elapsed <= 0:
        return None
    return AnniversaryMatch(elapsed)
