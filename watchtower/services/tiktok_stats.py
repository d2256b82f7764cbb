"""Creator statistics for the connected TikTok account."""

from __future__ import annotations

from watchtower.schemas.stats import TikTokStats

MOCK_STATS = TikTokStats(username="@tiktok_user", followers=12600, views7d=58300)


class TikTokStatsService:
    """Placeholder stats source that never contacts TikTok."""

    async def fetch_stats(self, access_token: str) -> TikTokStats:
        # TODO: query /v2/user/info/ and /v2/video/list/ with access_token.
        return MOCK_STATS


__all__ = ["MOCK_STATS", "TikTokStatsService"]
