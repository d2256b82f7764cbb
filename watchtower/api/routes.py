"""
FastAPI routes for the WatchTower relay.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from watchtower.clients.tiktok_auth import OAuthTokenExchangeError
from watchtower.dependencies import (
    get_app_settings,
    get_tiktok_oauth_client,
    get_tiktok_stats_service,
    get_tiktok_token_store,
)
from watchtower.schemas import ErrorResponse, TikTokStats

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_CONNECTED_ERROR = "TikTok not connected yet."
STATS_FAILED_ERROR = "Failed to fetch stats."


@router.get("/.well-known/tiktok.txt", response_class=PlainTextResponse)
async def tiktok_site_verification(
    settings: Annotated[Any, Depends(get_app_settings)],
) -> PlainTextResponse:
    """Serve the domain ownership token TikTok fetches during app review."""
    return PlainTextResponse(settings.tiktok.site_verification)


@router.get("/", response_class=PlainTextResponse)
async def root_check() -> PlainTextResponse:
    return PlainTextResponse("WatchTower Backend Running")


@router.get("/auth/tiktok", status_code=HTTPStatus.FOUND)
async def start_tiktok_oauth_flow(
    oauth_client: Annotated[Any, Depends(get_tiktok_oauth_client)],
) -> RedirectResponse:
    """Send the browser to the TikTok consent screen."""
    authorization_url = oauth_client.build_authorization_url()
    logger.info("TikTok auth URL: %s", authorization_url)
    return RedirectResponse(url=authorization_url, status_code=HTTPStatus.FOUND)


@router.get("/auth/tiktok/callback", status_code=HTTPStatus.FOUND)
async def handle_tiktok_oauth_callback(
    oauth_client: Annotated[Any, Depends(get_tiktok_oauth_client)],
    token_store: Annotated[Any, Depends(get_tiktok_token_store)],
    settings: Annotated[Any, Depends(get_app_settings)],
    code: str | None = Query(default=None, description="Authorization code returned by TikTok."),
    error: str | None = Query(default=None, description="Error code when consent was refused."),
    error_description: str | None = Query(default=None),
) -> RedirectResponse:
    """
    Complete the OAuth exchange and hand control back to the app via deep link.

    The browser only learns the outcome from the redirect target; every failure
    path lands on the same failure deep link and nothing is retried.
    """
    failure_redirect = RedirectResponse(
        url=settings.tiktok.failure_redirect, status_code=HTTPStatus.FOUND
    )

    if not code:
        logger.error(
            "No code returned from TikTok (error=%s, description=%s).",
            error,
            error_description,
        )
        return failure_redirect

    try:
        grant = await oauth_client.exchange_authorization_code(code)
    except OAuthTokenExchangeError as exc:
        logger.error("TikTok OAuth error: %s", exc)
        return failure_redirect
    except Exception:  # pylint: disable=broad-except
        logger.exception("Unexpected failure during TikTok OAuth exchange.")
        return failure_redirect

    token_store.save(grant)
    return RedirectResponse(url=settings.tiktok.success_redirect, status_code=HTTPStatus.FOUND)


@router.get(
    "/api/tiktok/stats",
    response_model=TikTokStats,
    responses={
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_tiktok_stats(
    token_store: Annotated[Any, Depends(get_tiktok_token_store)],
    stats_service: Annotated[Any, Depends(get_tiktok_stats_service)],
):
    """Return headline stats for the connected account (mock data for now)."""
    try:
        access_token = await token_store.get_access_token()
        if not access_token:
            return JSONResponse(
                status_code=HTTPStatus.UNAUTHORIZED,
                content={"error": NOT_CONNECTED_ERROR},
            )
        return await stats_service.fetch_stats(access_token)
    except Exception:  # pylint: disable=broad-except
        logger.exception("Error fetching TikTok stats.")
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"error": STATS_FAILED_ERROR},
        )
