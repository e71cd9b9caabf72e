from __future__ import annotations
from typing import Any, Dict

from ..core.names import animal, stem_branch
from .registry import register_attribute, jdn

def weekday(info) -> Dict[str, Any]:
    # 0=Mon..6=Sun; JDN 0 fell on a Monday.
    return {"weekday": jdn(info) % 7}

def sexagenary_year(info) -> Dict[str, Any]:
    y = info.chinese.year
    stem, branch = stem_branch(y)
    return {
        "stem": stem,
        "branch": branch,
        "animal": animal(y),
    }

def leap_month(info) -> Dict[str, Any]:
    return {"leap_month": info.chinese.month.is_leap}

register_attribute("weekday", weekday)
register_attribute("sexagenary_year", sexagenary_year)
register_attribute("leap_month", leap_month)
