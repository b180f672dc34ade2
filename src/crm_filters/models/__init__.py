"""Service request/response models."""

from .requests import FilterRequest
from .responses import FilterResponse

__all__ = [
    "FilterRequest",
    "FilterResponse",
]
