"""Short URL creation and redirection endpoints.

Logical failures are returned as ``{"error": ...}`` bodies with HTTP 200
unless STRICT_STATUS_CODES is enabled.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse
from starlette.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from shorturl.api import schemas
from shorturl.api.dependencies import get_shortener_service, get_base_url
from shorturl.core.config import settings
from shorturl.db.session import get_db
from shorturl.services.shortener import ShortenerService
from shorturl.services.exceptions import (
    URLValidationError,
    ShortCodeFormatError,
    URLNotFoundError,
)

router = APIRouter(prefix="/shorturl", tags=["shorturl"])

INVALID_URL_MESSAGE = "invalid URL"
INVALID_SHORT_ID_MESSAGE = "Invalid URL shortId. It must be a number."
PAGE_NOT_FOUND_MESSAGE = "Page not found"


def error_response(message: str, strict_status_code: int) -> JSONResponse:
    """Build a logical error payload with the configured status code."""
    status_code = strict_status_code if settings.STRICT_STATUS_CODES else status.HTTP_200_OK
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/new",
    response_model=schemas.ShortenResponse,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Invalid URL (strict mode)"},
    }
)
async def create_short_url(
    payload: Annotated[schemas.ShortenRequest, Form()],
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenerService = Depends(get_shortener_service),
    base_url: str = Depends(get_base_url)
):
    try:
        entry = await shortener_service.shorten(db, payload.url)
    except URLValidationError:
        logger.info("Rejected invalid URL submission")
        return error_response(INVALID_URL_MESSAGE, status.HTTP_400_BAD_REQUEST)

    return schemas.ShortenResponse(
        original_url=entry.original_url,
        short_code=entry.short_code,
        short_url=f"{base_url}{settings.API_PREFIX}/shorturl/{entry.short_code}",
    )


@router.get(
    "/{short_id}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    responses={
        400: {"model": schemas.ErrorResponse, "description": "Non-numeric shortId (strict mode)"},
        404: {"model": schemas.ErrorResponse, "description": "Unknown shortId (strict mode)"},
    }
)
async def redirect_to_original_url(
    short_id: str,
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenerService = Depends(get_shortener_service),
):
    """Redirect to the original URL registered under a numeric short code."""
    try:
        entry = await shortener_service.resolve(db, short_id)
    except ShortCodeFormatError:
        return error_response(INVALID_SHORT_ID_MESSAGE, status.HTTP_400_BAD_REQUEST)
    except URLNotFoundError:
        return error_response(PAGE_NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)

    return RedirectResponse(url=entry.original_url, status_code=status.HTTP_302_FOUND)
