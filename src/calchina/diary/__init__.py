from .codec import DiaryCodec, pack_year, unpack_year
from .config import DiaryConfig
from .integration import DiaryCalendar
from .mark import WindowMarker, mark_date_pattern
from .anniversary import RECURRING_DIFFERENCE, anniversary_difference

__all__ = [
    "DiaryCodec",
    "pack_year",
    "unpack_year",
    "DiaryConfig",
    "DiaryCalendar",
    "WindowMarker",
    "mark_date_pattern",
    "RECURRING_DIFFERENCE",
    "anniversary_difference",
]
