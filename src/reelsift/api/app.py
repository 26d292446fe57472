"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reelsift import __version__
from reelsift.api.deps import set_engine
from reelsift.api.v1.router import router as v1_router
from reelsift.config.settings import Settings
from reelsift.core.engine import ReelSiftEngine
from reelsift.providers.exceptions import (
    IncompleteMetadataError,
    InfoNotFoundError,
    InvalidIDError,
    InvalidURLError,
    ProviderNotFoundError,
    ReelSiftError,
)

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "REELSIFT_CONFIG_FILE"

_ERROR_STATUS: dict[type[ReelSiftError], int] = {
    ProviderNotFoundError: 404,
    InfoNotFoundError: 404,
    InvalidIDError: 400,
    InvalidURLError: 400,
    IncompleteMetadataError: 502,
}


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        # Explicit config file (set by the CLI), else auto-detect reelsift-config.yaml
        yaml_path = Path(os.environ.get(CONFIG_FILE_ENV, "reelsift-config.yaml"))
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting ReelSift v%s", __version__)

        engine = ReelSiftEngine(settings)
        await engine.initialize()
        set_engine(engine)

        app.state.settings = settings
        app.state.engine = engine

        logger.info("ReelSift is ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down ReelSift...")
        await engine.shutdown()
        set_engine(None)
        logger.info("ReelSift shutdown complete")

    app = FastAPI(
        title="ReelSift",
        description="Actor and movie metadata aggregated from pluggable providers.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ReelSiftError, _reelsift_error_handler)  # type: ignore[arg-type]
    app.include_router(v1_router, prefix="/v1")

    return app


async def _reelsift_error_handler(request: Request, exc: ReelSiftError) -> JSONResponse:
    """Translate ReelSift errors into JSON error responses."""
    status_code = next(
        (code for cls, code in _ERROR_STATUS.items() if isinstance(exc, cls)),
        500,
    )
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )
