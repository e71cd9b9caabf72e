from __future__ import annotations
from typing import Tuple

STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
BRANCHES = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
ANIMALS = ("Rat", "Ox", "Tiger", "Rabbit", "Dragon", "Snake",
           "Horse", "Goat", "Monkey", "Rooster", "Dog", "Pig")

MONTH_NAMES = ("正月", "二月", "三月", "四月", "五月", "六月",
               "七月", "八月", "九月", "十月", "冬月", "臘月")
LEAP_PREFIX = "閏"


def stem_branch(year: int) -> Tuple[str, str]:
    """Year 1..60 of a cycle -> (heavenly stem, earthly branch). Year 1 is 甲子."""
    return STEMS[(year - 1) % 10], BRANCHES[(year - 1) % 12]

def sexagenary_name(year: int) -> str:
    return "".join(stem_branch(year))

def animal(year: int) -> str:
    return ANIMALS[(year - 1) % 12]
