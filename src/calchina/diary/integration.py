"""
calchina.diary.integration
--------------------------
Everything a calendar-agnostic diary engine needs to handle Chinese-dated
entries: the month-name table, the entry symbol, the two date converters,
the pattern marker, and the texts used by list and insert commands.

Parsing diary files and inserting text stay with the host; entries arrive
here already split into (pattern, text) pairs.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from calchina.core.engine import CalendarBackend
from calchina.core.errors import BackendUnavailableError
from calchina.core.names import sexagenary_name
from calchina.core.types import DiaryDate
from .anniversary import anniversary_difference
from .codec import DiaryCodec
from .config import DiaryConfig
from .mark import MarkRoutine, mark_date_pattern

logger = logging.getLogger(__name__)

ENTRY_KINDS = ("entry", "monthly", "yearly", "anniversary")


class DiaryCalendar:
    def __init__(self, config: DiaryConfig, backend: CalendarBackend, *, mark: Optional[MarkRoutine] = None):
        self.config = config
        self.backend = backend
        self.codec = DiaryCodec(backend)
        self.mark = mark

    @property
    def month_names(self) -> Tuple[str, ...]:
        return self.config.month_names

    @property
    def entry_symbol(self) -> str:
        return self.config.entry_symbol

    def to_diary_date(self, absolute_day: int) -> DiaryDate:
        return self.codec.pack(absolute_day)

    def to_absolute_day(self, d: DiaryDate, prefer_leap: bool = False) -> int:
        return self.codec.unpack(d, prefer_leap)

    def mark_pattern(
        self,
        month: int,
        day: int,
        year: int,
        color: Optional[str] = None,
        *,
        mark: Optional[MarkRoutine] = None,
    ) -> None:
        routine = mark if mark is not None else self.mark
        if routine is None:
            raise BackendUnavailableError("no mark routine supplied by the host")
        mark_date_pattern(self.codec, month, day, year, color, mark=routine)

    def anniversary(self, month: int, day: int, year: Optional[int], absolute_day: int):
        return anniversary_difference(self.backend, month, day, year, absolute_day)

    # ---------------------------------------------------------
    # Listing and insertion texts
    # ---------------------------------------------------------

    def list_entries(self, entries: Iterable[Tuple[DiaryDate, str]], absolute_day: int) -> List[str]:
        """Texts of the entries whose pattern matches the day."""
        today = self.codec.pack(absolute_day)
        out = [text for pattern, text in entries if pattern.matches(today)]
        logger.debug("%d entries for %s", len(out), today)
        return out

    def entry_header(self, kind: str, absolute_day: int) -> str:
        """Date text that starts a new diary entry of the given kind."""
        d = self.codec.pack(absolute_day)
        sym = self.config.entry_symbol
        if kind == "entry":
            return f"{sym}{d.month}/{d.day}/{d.year}"
        if kind == "monthly":
            return f"{sym}*/{d.day}/*"
        if kind == "yearly":
            return f"{sym}{d.month}/{d.day}/*"
        if kind == "anniversary":
            return f"%%(diary-chinese-anniversary {d.month} {d.day} {d.year})"
        raise ValueError(f"Unknown entry kind '{kind}'. Available: {list(ENTRY_KINDS)}")

    def date_string(self, absolute_day: int) -> str:
        c = self.backend.from_absolute(absolute_day)
        month = self.config.month_name(c.month.number, c.month.is_leap)
        return f"Cycle {c.cycle}, year {c.year} ({sexagenary_name(c.year)}), {month} {c.day}"
