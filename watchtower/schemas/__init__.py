"""Public schema exports."""

from .stats import ErrorResponse, TikTokStats

__all__ = [
    "ErrorResponse",
    "TikTokStats",
]
