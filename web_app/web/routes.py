"""Web interface routes implementation."""

import logging
import os
from fastapi import APIRouter, Depends, Request, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from quicklink.exceptions import KeyGenerationError, NotFoundError
from ..dependencies import request_host

router = APIRouter()
logger = logging.getLogger("quicklink.web")

template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")
templates = Jinja2Templates(directory=template_dir)


def _error_page(request: Request, message: str, status_code: int) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error_message": message},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the form."""
    return templates.TemplateResponse(request, "index.html", {})


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def shorten_url_web(
    request: Request,
    url: str = Form(...),
    host: str = Depends(request_host),
):
    """Handle form submission and show the short link.

    The submitted value is stored exactly as typed; only blank input is
    rejected.
    """
    service = request.app.state.service

    if not url.strip():
        return _error_page(request, "Please enter a URL to shorten", status.HTTP_400_BAD_REQUEST)

    try:
        shortened_url = service.shorten(url, host)
    except KeyGenerationError as e:
        logger.error(f"Failed to shorten {url}: {e}")
        return _error_page(request, "Could not allocate a short link, please retry", status.HTTP_503_SERVICE_UNAVAILABLE)

    return templates.TemplateResponse(
        request,
        "result.html",
        {"base_url": url, "shortened_url": shortened_url},
    )


@router.get("/{key_id}", include_in_schema=False)
async def redirect_to_url(request: Request, key_id: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = service.resolve(key_id)
    except NotFoundError:
        logger.info(f"Short key not found: {key_id}")
        return _error_page(request, f"Short link '{key_id}' not found", status.HTTP_404_NOT_FOUND)

    # Temporary redirect: mappings do not survive a restart
    return RedirectResponse(url=original_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
