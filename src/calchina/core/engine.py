from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Protocol

from .types import ChineseDate, Month

class CalendarBackend(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def from_absolute(self, absolute_day: int) -> ChineseDate: ...
    def to_absolute(self, d: ChineseDate) -> int: ...
    def leap_months(self, cycle: int, year: int) -> FrozenSet[Month]: ...
    def months(self, cycle: int, year: int) -> List[Month]: ...

@dataclass
class BackendRegistry:
    _backends: Dict[str, CalendarBackend]

    def get(self, name: str) -> CalendarBackend:
        if name not in self._backends:
            raise KeyError(f"Unknown backend '{name}'. Available: {sorted(self._backends)}")
        return self._backends[name]

    def list(self) -> List[str]:
        return sorted(self._backends.keys())

    def register(self, name: str, backend: CalendarBackend, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._backends):
            raise KeyError(f"Backend '{name}' already exists. Use overwrite=True to replace.")
        self._backends[name] = backend
