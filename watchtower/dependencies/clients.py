"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from watchtower.clients import TikTokOAuthClient
from watchtower.core.config import get_settings
from watchtower.services import TikTokStatsService, TikTokTokenStore


@lru_cache()
def get_tiktok_oauth_client() -> TikTokOAuthClient:
    """Create a singleton TikTok OAuth client."""
    settings = get_settings()
    return TikTokOAuthClient(settings.tiktok, settings.oauth)


@lru_cache()
def get_tiktok_token_store() -> TikTokTokenStore:
    """Provide the process-wide TikTok token slot."""
    return TikTokTokenStore()


@lru_cache()
def get_tiktok_stats_service() -> TikTokStatsService:
    return TikTokStatsService()
