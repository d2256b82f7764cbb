"""
In-process storage for the TikTok token set.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from watchtower.models.oauth import TikTokTokenGrant, TokenRecord, now_ms

logger = logging.getLogger(__name__)


class TikTokTokenStore:
    """
    Single global slot holding the most recently exchanged TikTok tokens.

    The slot is shared by every caller and lives only as long as the process.
    Writes are not serialized: when two callbacks complete concurrently the
    later ``save`` wins and the other token set is dropped. Each write replaces
    the record reference in one step, so readers always observe a complete
    record.
    """

    def __init__(self, clock: Callable[[], int] = now_ms) -> None:
        self._clock = clock
        self._record = TokenRecord()

    @property
    def record(self) -> TokenRecord:
        return self._record

    def save(self, grant: TikTokTokenGrant) -> TokenRecord:
        """Overwrite the slot with tokens from a successful exchange."""
        record = TokenRecord.from_grant(grant, issued_at_ms=self._clock())
        self._record = record
        logger.info("TikTok tokens saved for: %s", grant.open_id)
        return record

    async def get_access_token(self) -> Optional[str]:
        """
        Return the stored access token, or ``None`` when nothing is connected.

        Expired tokens are returned unchanged. Refreshing them through the
        stored refresh token belongs here once it is implemented.
        """
        record = self._record
        if not record.access_token:
            return None

        if record.is_expired(self._clock()):
            logger.debug("Returning expired TikTok access token for %s", record.open_id)
        return record.access_token


__all__ = ["TikTokTokenStore"]
