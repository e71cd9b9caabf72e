from . import standard as _standard  # noqa: F401
from .registry import compute_attributes, list_attributes, register_attribute

__all__ = ["compute_attributes", "list_attributes", "register_attribute"]
