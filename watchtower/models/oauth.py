"""
Domain models for the TikTok OAuth token exchange.
"""

import time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class TikTokTokenGrant(BaseModel):
    """Token payload returned by the TikTok ``/v2/oauth/token/`` endpoint."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    refresh_token: str = Field(..., min_length=1)
    open_id: str = Field(..., min_length=1, description="TikTok subject identifier.")
    expires_in: int = Field(..., ge=0, description="Seconds until the access token expires.")
    scope: Optional[str] = None
    token_type: Optional[str] = None


class TokenRecord(BaseModel):
    """
    The token set held in memory for the connected TikTok account.

    Either every field is populated or none is; records are only ever built
    whole and swapped in place of the previous one.
    """

    model_config = ConfigDict(frozen=True)

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    open_id: Optional[str] = None
    expires_at: Optional[int] = Field(
        None, description="Expiry as milliseconds since the Unix epoch."
    )

    @classmethod
    def from_grant(cls, grant: TikTokTokenGrant, issued_at_ms: int) -> "TokenRecord":
        return cls(
            access_token=grant.access_token,
            refresh_token=grant.refresh_token,
            open_id=grant.open_id,
            expires_at=issued_at_ms + grant.expires_in * 1000,
        )

    @property
    def is_connected(self) -> bool:
        return self.access_token is not None

    def is_expired(self, at_ms: Optional[int] = None) -> bool:
        """True once ``at_ms`` (default: now) reaches ``expires_at``."""
        if self.expires_at is None:
            return False
        current = now_ms() if at_ms is None else at_ms
        return current >= self.expires_at


__all__ = ["TikTokTokenGrant", "TokenRecord", "now_ms"]
