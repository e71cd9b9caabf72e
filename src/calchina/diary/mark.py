"""
calchina.diary.mark
-------------------
Marking of Chinese-dated diary patterns on a calendar.

The host owns the generic routine that puts marks on visible dates. It is
called as ``mark(month, day, year, from_absolute, to_absolute, color)``
where the two callables translate between absolute days and diary dates.
``WindowMarker`` is a self-contained version of that routine over a fixed
window of absolute days.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from calchina.core.errors import InvalidChineseDateError
from calchina.core.types import DiaryDate
from .codec import DiaryCodec

logger = logging.getLogger(__name__)

FromAbsolute = Callable[[int], DiaryDate]
ToAbsolute = Callable[[DiaryDate], int]
MarkRoutine = Callable[[int, int, int, FromAbsolute, ToAbsolute, Optional[str]], None]

WILDCARD = 0


def mark_date_pattern(
    codec: DiaryCodec,
    month: int,
    day: int,
    year: int,
    color: Optional[str] = None,
    *,
    mark: MarkRoutine,
) -> None:
    """Mark dates matching the pattern month/day/year (0 = any).

    A packed month number may name either the regular or the leap month of
    that number, so a specific month is marked once for each reading. A
    wildcard month is matched against every visible day and already covers
    both.
    """
    mark(month, day, year, codec.from_absolute, codec.to_absolute, color)
    if month != WILDCARD:
        mark(month, day, year, codec.from_absolute, codec.to_absolute_leap, color)


class WindowMarker:
    """Generic mark routine over the absolute days ``first..last`` inclusive."""

    def __init__(self, first: int, last: int):
        if last < first:
            raise ValueError("last must be >= first")
        self.first = first
        self.last = last
        self.marks: Dict[int, Optional[str]] = {}

    def visible(self, absolute_day: int) -> bool:
        return self.first <= absolute_day <= self.last

    def __call__(
        self,
        month: int,
        day: int,
        year: int,
        from_absolute: FromAbsolute,
        to_absolute: ToAbsolute,
        color: Optional[str] = None,
    ) -> None:
        pattern = DiaryDate(month, day, year)

        if not pattern.is_wildcard:
            try:
                absolute_day = to_absolute(pattern)
            except InvalidChineseDateError as e:
                logger.debug("skipping %s: %s", pattern, e)
                return
            if self.visible(absolute_day):
                self.marks[absolute_day] = color
            return

        skipped = 0
        for absolute_day in range(self.first, self.last + 1):
            try:
                d = from_absolute(absolute_day)
            except InvalidChineseDateError:
                skipped += 1
                continue
            if pattern.matches(d):
                self.marks[absolute_day] = color
        if skipped:
            logger.debug("skipped %d days outside the calendar for %s", skipped, pattern)
