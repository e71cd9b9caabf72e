from __future__ import annotations
from calchina.core.engine import BackendRegistry
from calchina.engines import LunarDateBackend

def build_registry() -> BackendRegistry:
    backends = {"lunardate": LunarDateBackend()}
    return BackendRegistry(backends)
