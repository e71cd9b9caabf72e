"""calchina public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_gregorian,
    months_in_year,
    list_backends,
    backend_info,
    get_backend,
    register_backend,
    codec,
    pack,
    unpack,
    anniversary,
    make_diary_calendar,
)
from .core.errors import CalchinaError, InvalidChineseDateError, BackendUnavailableError
from .core.types import AnniversaryMatch, ChineseDate, DayInfo, DiaryDate, Month
from .diary import DiaryCalendar, DiaryCodec, DiaryConfig, WindowMarker, mark_date_pattern

__all__ = [
    "day_info",
    "to_gregorian",
    "months_in_year",
    "list_backends",
    "backend_info",
    "get_backend",
    "register_backend",
    "codec",
    "pack",
    "unpack",
    "anniversary",
    "make_diary_calendar",
    "CalchinaError",
    "InvalidChineseDateError",
    "BackendUnavailableError",
    "AnniversaryMatch",
    "ChineseDate",
    "DayInfo",
    "DiaryDate",
    "Month",
    "DiaryCalendar",
    "DiaryCodec",
    "DiaryConfig",
    "WindowMarker",
    "mark_date_pattern",
]
