from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Union

from .errors import InvalidChineseDateError

LegacyMonth = Union[int, float]

@dataclass(frozen=True, order=True)
class Month:
    number: int
    is_leap: bool = False

    def __post_init__(self) -> None:
        if not (1 <= self.number <= 12):
            raise InvalidChineseDateError(f"month number must be in 1..12, got {self.number}")

    @classmethod
    def from_legacy(cls, value: LegacyMonth) -> "Month":
        """Decode the fractional encoding: 4 is the fourth month, 4.5 its leap month."""
        number = int(value)
        frac = value - number
        if frac not in (0, 0.5):
            raise ValueError(f"legacy month must be an integer or end in .5, got {value!r}")
        return cls(number, frac == 0.5)

    @property
    def legacy(self) -> LegacyMonth:
        return self.number + 0.5 if self.is_leap else self.number

    def __str__(self) -> str:
        return f"{self.number}L" if self.is_leap else str(self.number)

@dataclass(frozen=True)
class ChineseDate:
    cycle: int
    year: int  # 1..60 within the cycle
    month: Month
    day: int

    def __post_init__(self) -> None:
        if self.cycle < 1:
            raise InvalidChineseDateError(f"cycle must be >= 1, got {self.cycle}")
        if not (1 <= self.year <= 60):
            raise InvalidChineseDateError(f"year must be in 1..60, got {self.year}")
        if not (1 <= self.day <= 30):
            raise InvalidChineseDateError(f"day must be in 1..30, got {self.day}")

    @property
    def cycle_year(self) -> int:
        """Years counted continuously from cycle 1, year 1."""
        return (self.cycle - 1) * 60 + self.year

@dataclass(frozen=True)
class DiaryDate:
    """Month/day/year shape seen by the diary engine; year is cycle*100 + year.

    As a pattern, 0 in any field matches anything.
    """
    month: int
    day: int
    year: int

    def matches(self, other: "DiaryDate") -> bool:
        return all(
            want == 0 or want == got
            for want, got in ((self.month, other.month), (self.day, other.day), (self.year, other.year))
        )

    @property
    def is_wildcard(self) -> bool:
        return 0 in (self.month, self.day, self.year)

@dataclass(frozen=True)
class AnniversaryMatch:
    years: int
    recurring: bool = False

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    absolute_day: int
    chinese: ChineseDate
    diary: DiaryDate
    backend: str
    attributes: Optional[Dict[str, Any]] = None
