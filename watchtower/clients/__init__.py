"""Expose constructed client wrappers."""

from .tiktok_auth import OAuthTokenExchangeError, TikTokOAuthClient

__all__ = [
    "OAuthTokenExchangeError",
    "TikTokOAuthClient",
]
