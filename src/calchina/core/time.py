from __future__ import annotations
from datetime import date

# Absolute day 1 is 0001-01-01 (proleptic Gregorian), the same count as date.toordinal().
JDN_OFFSET = 1721425


def absolute_from_date(d: date) -> int:
    """Gregorian date -> absolute day number."""
    return d.toordinal()

def date_from_absolute(absolute_day: int) -> date:
    return date.fromordinal(absolute_day)

def jdn_from_absolute(absolute_day: int) -> int:
    """Absolute day -> Julian Day Number; JDN 2451545 is 2000-01-01."""
    return absolute_day + JDN_OFFSET
