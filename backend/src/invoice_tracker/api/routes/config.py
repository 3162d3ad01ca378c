"""
Configuration endpoint.

Exposes the POC configuration, including the Loki Mode integration flags.
"""

import logging

from fastapi import APIRouter

from invoice_tracker import __version__
from invoice_tracker.api.schemas import (
    IntegrationFlagsResponse,
    LokiConfigResponse,
    PageLinkResponse,
    PocConfigResponse,
)
from invoice_tracker.config import get_settings
from invoice_tracker.web.pages import navigation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/config", tags=["config"])


@router.get("", response_model=PocConfigResponse)
async def get_poc_config() -> PocConfigResponse:
    """
    Get the current POC configuration.

    Flags are reported as configured. What an enabled integration does
    is not defined by the POC.
    """
    settings = get_settings()
    integrations = settings.loki.integrations
    logger.debug(f"Config requested, enabled integrations: {settings.enabled_integrations}")

    return PocConfigResponse(
        app_title=settings.app_title,
        version=__version__,
        loki=LokiConfigResponse(
            integrations=IntegrationFlagsResponse(
                jurisdiction=integrations.jurisdiction,
                checkpoints=integrations.checkpoints,
                verification=integrations.verification,
            ),
        ),
        pages=[PageLinkResponse(name=page.name, path=page.path) for page in navigation()],
    )
