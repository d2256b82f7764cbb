"""
TikTok OAuth utilities.

Builds the consent URL for TikTok Login Kit and performs the one-shot
authorization code exchange. Tokens are not refreshed.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from watchtower.core.config import OAuthSettings, TikTokSettings
from watchtower.models.oauth import TikTokTokenGrant

logger = logging.getLogger(__name__)


class OAuthTokenExchangeError(Exception):
    """Raised when the token endpoint cannot produce a usable token set."""


class TikTokOAuthClient:
    """Build TikTok authorization URLs and exchange authorization codes."""

    AUTH_BASE_URL = "https://www.tiktok.com/v2/auth/authorize/"
    TOKEN_URL = "https://open.tiktokapis.com/v2/oauth/token/"

    def __init__(
        self,
        tiktok_settings: TikTokSettings,
        oauth_settings: OAuthSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._tiktok = tiktok_settings
        self._oauth = oauth_settings
        self._transport = transport

    def build_authorization_url(self, state: Optional[str] = None) -> str:
        """
        Construct the TikTok consent URL.

        Unset credentials are sent as empty values; TikTok rejects the request
        on its consent page rather than here.
        """
        params = {
            "client_key": self._tiktok.client_key or "",
            "response_type": "code",
            "scope": ",".join(self._oauth.scopes),
            "redirect_uri": self._tiktok.redirect_uri or "",
            "state": state if state is not None else self._oauth.state,
        }
        return f"{self.AUTH_BASE_URL}?{urlencode(params)}"

    async def exchange_authorization_code(self, code: str) -> TikTokTokenGrant:
        """
        Exchange an authorization code for an access/refresh token pair.

        A single POST is made with no retry. Transport failures, non-2xx
        responses and incomplete payloads all raise ``OAuthTokenExchangeError``.
        """
        payload = {
            "client_key": self._tiktok.client_key or "",
            "client_secret": self._tiktok.client_secret or "",
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": self._tiktok.redirect_uri or "",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._tiktok.http_timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.TOKEN_URL,
                    data=payload,
                    headers={"Cache-Control": "no-cache"},
                )
        except httpx.HTTPError as exc:
            raise OAuthTokenExchangeError(f"TikTok token request failed: {exc!r}") from exc

        if not response.is_success:
            raise OAuthTokenExchangeError(response.text)

        try:
            token_payload = response.json()
        except ValueError as exc:
            raise OAuthTokenExchangeError(response.text) from exc

        try:
            grant = TikTokTokenGrant.model_validate(token_payload)
        except ValidationError as exc:
            # TikTok reports grant errors with a 200 and an ``error`` field.
            raise OAuthTokenExchangeError(
                f"Incomplete token payload returned from TikTok: {token_payload}"
            ) from exc

        logger.debug("TikTok token exchange succeeded for %s", grant.open_id)
        return grant


__all__ = [
    "OAuthTokenExchangeError",
    "TikTokOAuthClient",
]
