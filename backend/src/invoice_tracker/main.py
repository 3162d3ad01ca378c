"""
FastAPI application entry point.

This is the main application that ties together all components:
- HTML page shell with the placeholder views
- JSON API for health and POC configuration
- CORS configuration for frontend access
- Error handling and logging
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoice_tracker import __version__
from invoice_tracker.api.routes import config, health
from invoice_tracker.api.schemas import ErrorResponse
from invoice_tracker.config import Settings, get_settings
from invoice_tracker.web import routes as web
from invoice_tracker.web.routes import render_not_found

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging from settings.

    Handlers are installed once; the level follows the current settings
    every time an app is created.
    """
    logging.basicConfig(
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)


def is_api_path(path: str) -> bool:
    """True for /api and anything below /api/, not for /apiary."""
    return path == API_PREFIX or path.startswith(f"{API_PREFIX}/")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Nothing to acquire yet, startup only reports the configuration.
    """
    settings = get_settings()

    logger.info(f"Starting Invoice Tracker v{__version__}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Loki integrations enabled: {', '.join(settings.enabled_integrations) or 'none'}")

    yield  # Application runs here

    logger.info("Shutting down Invoice Tracker")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance ready to serve requests.
    """
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Invoice Tracker API",
        description=(
            "Invoice Tracker proof of concept.\n\n"
            "Serves the page shell with placeholder views and reports "
            "the Loki Mode integration flags."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(config.router, prefix=f"{API_PREFIX}/v1")
    app.include_router(web.router)

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception):
        """Unmatched pages get the shell, API paths get JSON."""
        if is_api_path(request.url.path):
            error = ErrorResponse(error="Not Found", detail=getattr(exc, "detail", None))
            return JSONResponse(status_code=404, content=error.model_dump())
        return render_not_found(request)

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all exception handler for unhandled errors."""
        logger.exception(f"Unhandled error: {exc}")

        # Don't expose internal errors in production
        if settings.debug:
            detail = str(exc)
        else:
            detail = "An internal error occurred"

        error = ErrorResponse(error="Internal Server Error", detail=detail)
        return JSONResponse(status_code=500, content=error.model_dump())

    return app


# Create the application instance
app = create_app()


# Development server entry point
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "invoice_tracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
