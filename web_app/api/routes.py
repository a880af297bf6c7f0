"""API routes implementation."""

import logging
from fastapi import APIRouter, Depends, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    ExpandRequest,
    ExpandResponse,
    URLInfoResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from quicklink.exceptions import InvalidInputError, KeyGenerationError, NotFoundError
from ..dependencies import request_host

router = APIRouter()
logger = logging.getLogger("quicklink.api")


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        422: {"description": "Invalid request"},
        503: {"model": ErrorResponse, "description": "No free short key"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Shortening the same URL twice returns the same key.",
)
async def shorten_url(request: Request, body: ShortenRequest, host: str = Depends(request_host)):
    """Create a shortened URL."""
    service = request.app.state.service

    try:
        key = service.shorten_url(body.url)
    except KeyGenerationError as e:
        logger.error(f"Failed to shorten {body.url}: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )

    return ShortenResponse(
        key=key.token,
        short_url=key.build_url(host),
        original_url=body.url,
    )


@router.get(
    "/urls/{key_id}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short key not found"},
    },
    summary="Get URL information",
)
async def get_url_info(request: Request, key_id: str, host: str = Depends(request_host)):
    """Get information about a shortened URL."""
    service = request.app.state.service

    try:
        original_url = service.resolve(key_id)
    except NotFoundError:
        logger.info(f"Short key not found: {key_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short key '{key_id}' not found",
        )

    key = service.key_type.from_id(key_id)
    return URLInfoResponse(
        key=key.token,
        short_url=key.build_url(host),
        original_url=original_url,
    )


@router.post(
    "/expand",
    response_model=ExpandResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Short URL has no path segment"},
        404: {"model": ErrorResponse, "description": "Short key not found"},
    },
    summary="Expand short URL",
    description="Look up the original URL behind a complete short URL.",
)
async def expand_url(request: Request, body: ExpandRequest):
    """Expand a complete short URL."""
    service = request.app.state.service

    try:
        original_url = service.expand(body.short_url)
    except InvalidInputError as e:
        logger.info(f"Rejected short URL {body.short_url}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError:
        logger.info(f"Short URL not found: {body.short_url}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short URL '{body.short_url}' not found",
        )

    key = service.key_type.from_url(body.short_url)
    return ExpandResponse(key=key.token, original_url=original_url)


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    return StatisticsResponse(**service.get_statistics())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        storage="healthy" if health["storage"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
