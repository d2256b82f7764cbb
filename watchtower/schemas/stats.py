"""Schemas returned by the stats API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TikTokStats(BaseModel):
    """Headline numbers for the connected TikTok account."""

    username: str = Field(..., description="Display handle, including the leading @.")
    followers: int = Field(..., ge=0)
    views7d: int = Field(..., ge=0, description="Video views over the last seven days.")


class ErrorResponse(BaseModel):
    """Error body returned by the stats API."""

    error: str


__all__ = ["ErrorResponse", "TikTokStats"]
