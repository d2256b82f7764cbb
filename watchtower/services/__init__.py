"""Service layer exports."""

from .tiktok_stats import MOCK_STATS, TikTokStatsService
from .tiktok_tokens import TikTokTokenStore

__all__ = [
    "MOCK_STATS",
    "TikTokStatsService",
    "TikTokTokenStore",
]
