from .lunardate_backend import LunarDateBackend

__all__ = ["LunarDateBackend"]
