"""
HTML page endpoints.

Renders the page shell (header, nav, footer) around one placeholder view.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from invoice_tracker.config import get_settings
from invoice_tracker.web.pages import PAGES, PlaceholderPage, get_page, navigation

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def _shell_context(current: PlaceholderPage | None) -> dict:
    settings = get_settings()
    return {
        "app_title": settings.app_title,
        "footer_text": settings.footer_text,
        "nav": navigation(),
        "current": current,
    }


def render_page(request: Request, page: PlaceholderPage) -> HTMLResponse:
    """Render a placeholder page inside the shell."""
    logger.debug(f"Rendering page {page.name} at {page.path}")
    return templates.TemplateResponse(
        request,
        "page.html",
        {**_shell_context(page), "page": page},
    )


def render_not_found(request: Request) -> HTMLResponse:
    """Render the shell with no matched view."""
    logger.info(f"No page for path {request.url.path}")
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {**_shell_context(None), "path": request.url.path},
        status_code=status.HTTP_404_NOT_FOUND,
    )


async def placeholder_page(request: Request) -> HTMLResponse:
    """Serve whichever registered page owns the request path."""
    page = get_page(request.url.path)
    if page is None:
        return render_not_found(request)
    return render_page(request, page)


# HEAD is answered too, for link checkers and proxies
for _page in PAGES:
    router.add_api_route(
        _page.path,
        placeholder_page,
        methods=["GET", "HEAD"],
        name=_page.endpoint,
    )
