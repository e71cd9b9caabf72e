"""
calchina.engines.lunardate_backend
----------------------------------
Chinese calendar backend built on the ``lunardate`` tables (lunar years
1900-2099).

``lunardate`` labels years by the Gregorian year in which they begin.
Here they are relabelled as (cycle, year-in-cycle), counting cycle 1,
year 1 from 2637 BCE, so the 78th cycle began with the new year of 1984.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from typing import Any, Dict, FrozenSet, List, Tuple

from lunardate import LunarDate

from calchina.core.errors import InvalidChineseDateError
from calchina.core.time import absolute_from_date, date_from_absolute
from calchina.core.types import ChineseDate, Month

logger = logging.getLogger(__name__)

# Gregorian year in which cycle 1, year 1 began is -2636 (2637 BCE).
CYCLE_EPOCH_YEAR = -2636

FIRST_LUNAR_YEAR = 1900
LAST_LUNAR_YEAR = 2099
FIRST_ABSOLUTE = absolute_from_date(date(1900, 1, 31))


def cycle_from_lunar_year(lunar_year: int) -> Tuple[int, int]:
    """Lunar year (Gregorian year of its new year) -> (cycle, year 1..60)."""
    offset = lunar_year - CYCLE_EPOCH_YEAR
    return offset // 60 + 1, offset % 60 + 1

def lunar_year_from_cycle(cycle: int, year: int) -> int:
    return CYCLE_EPOCH_YEAR + (cycle - 1) * 60 + (year - 1)


class LunarDateBackend:
    name = "lunardate"

    def info(self) -> Dict[str, Any]:
        first = cycle_from_lunar_year(FIRST_LUNAR_YEAR)
        last = cycle_from_lunar_year(LAST_LUNAR_YEAR)
        return {
            "name": self.name,
            "first": {"cycle": first[0], "year": first[1], "lunar_year": FIRST_LUNAR_YEAR},
            "last": {"cycle": last[0], "year": last[1], "lunar_year": LAST_LUNAR_YEAR},
        }

    def _lunar_year(self, cycle: int, year: int) -> int:
        y = lunar_year_from_cycle(cycle, year)
        if not (FIRST_LUNAR_YEAR <= y <= LAST_LUNAR_YEAR):
            raise InvalidChineseDateError(
                f"cycle {cycle} year {year} (lunar year {y}) is outside "
                f"{FIRST_LUNAR_YEAR}..{LAST_LUNAR_YEAR}"
            )
        return y

    def from_absolute(self, absolute_day: int) -> ChineseDate:
        if absolute_day < FIRST_ABSOLUTE:
            raise InvalidChineseDateError(f"absolute day {absolute_day} precedes lunar year {FIRST_LUNAR_YEAR}")
        g = date_from_absolute(absolute_day)
        try:
            ld = LunarDate.from_solar_date(g.year, g.month, g.day)
        except ValueError as e:
            raise InvalidChineseDateError(f"{g.isoformat()} is outside the lunar table") from e

        cycle, year = cycle_from_lunar_year(ld.year)
        return ChineseDate(cycle, year, Month(ld.month, ld.is_leap_month), ld.day)

    def to_absolute(self, d: ChineseDate) -> int:
        y = self._lunar_year(d.cycle, d.year)
        try:
            g = LunarDate(y, d.month.number, d.day, d.month.is_leap).to_solar_date()
        except ValueError as e:
            raise InvalidChineseDateError(
                f"no day {d.day} of month {d.month} in cycle {d.cycle} year {d.year}: {e}"
            ) from e
        return absolute_from_date(g)

    def leap_months(self, cycle: int, year: int) -> FrozenSet[Month]:
        return _leap_months(self._lunar_year(cycle, year))

    def months(self, cycle: int, year: int) -> List[Month]:
        leaps = self.leap_months(cycle, year)
        out = []
        for number in range(1, 13):
            out.append(Month(number))
            if Month(number, True) in leaps:
                out.append(Month(number, True))
        return out


@lru_cache(maxsize=256)
def _leap_months(lunar_year: int) -> FrozenSet[Month]:
    # A month that is not intercalary in this year fails to_solar_date.
    found = set()
    for number in range(1, 13):
        try:
            LunarDate(lunar_year, number, 1, True).to_solar_date()
        except ValueError:
            continue
        found.add(Month(number, True))
    logger.debug("lunar year %d leap months: %s", lunar_year, sorted(found))
    return frozenset(found)
