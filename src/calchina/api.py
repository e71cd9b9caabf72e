from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import BackendRegistry, CalendarBackend
from .core.types import AnniversaryMatch, ChineseDate, DayInfo, DiaryDate, Month
from .core.time import absolute_from_date, date_from_absolute
from .attributes import compute_attributes
from .diary.anniversary import anniversary_difference
from .diary.codec import DiaryCodec
from .diary.config import DiaryConfig
from .diary.integration import DiaryCalendar
from .diary.mark import MarkRoutine

_registry: Optional[BackendRegistry] = None

def set_registry(reg: BackendRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> BackendRegistry:
    if _registry is None:
        raise RuntimeError("Backend registry not initialized")
    return _registry

def list_backends() -> List[str]:
    return _reg().list()

def backend_info(backend: str = "lunardate") -> Dict[str, Any]:
    return _reg().get(backend).info()

def get_backend(backend: str = "lunardate") -> CalendarBackend:
    return _reg().get(backend)

def register_backend(name: str, backend: CalendarBackend, *, overwrite: bool = False) -> None:
    _reg().register(name, backend, overwrite=overwrite)

def codec(backend: str = "lunardate") -> DiaryCodec:
    return DiaryCodec(_reg().get(backend))

# ============================================================
# Day-level API
# ============================================================

def day_info(
    d: date,
    *,
    backend: str = "lunardate",
    attributes: Sequence[str] = (),
) -> DayInfo:
    eng = _reg().get(backend)
    absolute_day = absolute_from_date(d)
    chinese = eng.from_absolute(absolute_day)
    info = DayInfo(
        civil_date=d,
        absolute_day=absolute_day,
        chinese=chinese,
        diary=DiaryCodec(eng).pack(absolute_day),
        backend=backend,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def to_gregorian(t: ChineseDate, *, backend: str = "lunardate") -> date:
    return date_from_absolute(_reg().get(backend).to_absolute(t))

def months_in_year(cycle: int, year: int, *, backend: str = "lunardate") -> List[Month]:
    return _reg().get(backend).months(cycle, year)

# ============================================================
# Diary API
# ============================================================

def pack(absolute_day: int, *, backend: str = "lunardate") -> DiaryDate:
    return codec(backend).pack(absolute_day)

def unpack(d: DiaryDate, *, prefer_leap: bool = False, backend: str = "lunardate") -> int:
    return codec(backend).unpack(d, prefer_leap)

def anniversary(
    month: int,
    day: int,
    year: Optional[int],
    absolute_day: int,
    *,
    backend: str = "lunardate",
) -> Optional[AnniversaryMatch]:
    return anniversary_difference(_reg().get(backend), month, day, year, absolute_day)

def make_diary_calendar(
    config: Optional[DiaryConfig] = None,
    *,
    mark: Optional[MarkRoutine] = None,
) -> DiaryCalendar:
    cfg = config if config is not None else DiaryConfig()
    return DiaryCalendar(cfg, _reg().get(cfg.backend), mark=mark)
