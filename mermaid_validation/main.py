"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, mermaid_validation.api, mermaid_validation.configs
System role: Application initialization and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from mermaid_validation import __version__
from mermaid_validation.api.routers import health_router, validation_router
from mermaid_validation.api.routers.error_handling import (
    request_validation_exception_handler,
)
from mermaid_validation.application.services import ValidationService
from mermaid_validation.configs import Settings, get_settings
from mermaid_validation.observability.logger import configure_logging
from mermaid_validation.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and creates the scratch directory once at startup.
    The directory is left in place on shutdown.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)

    scratch_dir = app.state.validation_service.scratch.ensure()
    logger.info(
        "Mermaid validation service starting",
        extra={
            "scratch_dir": str(scratch_dir),
            "renderer": " ".join(settings.renderer.command),
            "timeout_seconds": settings.renderer.timeout_seconds,
        },
    )

    yield

    logger.info("Mermaid validation service stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Explicit settings, defaults to the cached environment settings

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Mermaid Validation API",
        description="Validates Mermaid diagram source by rendering it with mermaid-cli",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.validation_service = ValidationService.from_settings(settings.renderer)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    app.include_router(health_router)
    app.include_router(validation_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    settings = get_settings()
    uvicorn.run(
        "mermaid_validation.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
