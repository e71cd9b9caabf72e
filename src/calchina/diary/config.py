from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Tuple

from calchina.core.names import LEAP_PREFIX, MONTH_NAMES


@dataclass(frozen=True)
class DiaryConfig:
    """Settings handed to the diary integration layer."""
    month_names: Tuple[str, ...] = MONTH_NAMES
    entry_symbol: str = "C"  # prefix marking a diary line as Chinese-dated
    backend: str = "lunardate"
    leap_prefix: str = LEAP_PREFIX

    def __post_init__(self) -> None:
        if len(self.month_names) != 12:
            raise ValueError(f"month_names must hold 12 names, got {len(self.month_names)}")
        if len(self.entry_symbol) != 1:
            raise ValueError(f"entry_symbol must be a single character, got {self.entry_symbol!r}")
        object.__setattr__(self, "month_names", tuple(self.month_names))

    def tweak(self, **kwargs) -> "DiaryConfig":
        return replace(self, **kwargs)

    def month_name(self, number: int, is_leap: bool = False) -> str:
        name = self.month_names[number - 1]
        return self.leap_prefix + name if is_leap else name
