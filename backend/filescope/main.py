"""
FileScope API Application

Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from filescope.api.dependencies import get_analyzer
from filescope.api.routes import get_api_router
from filescope.config import Settings, get_settings
from filescope.utils.constants import APP_DESCRIPTION
from filescope.utils.exceptions import (
    FileScopeBaseException,
    FileTooLargeError,
    UnreadableInputError,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} API v{settings.app_version}...")
    logger.info(f"  Max upload size: {settings.max_file_size_mb} MB")
    logger.info(f"  Min string length: {settings.min_string_length}")

    # Build the engine up front so configuration errors surface at startup
    get_analyzer()

    logger.info(f"{settings.app_name} API started successfully")

    yield

    logger.info(f"{settings.app_name} API shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=APP_DESCRIPTION,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    logger.info(f"CORS allowed origins: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(get_api_router())

    @app.get("/")
    async def root():
        """Root endpoint - API info."""
        return {
            "name": f"{settings.app_name} API",
            "description": APP_DESCRIPTION,
            "version": settings.app_version,
            "docs": "/docs",
        }

    @app.exception_handler(FileScopeBaseException)
    async def filescope_exception_handler(request: Request, exc: FileScopeBaseException):
        """Map project errors that escape a route to JSON responses."""
        if isinstance(exc, FileTooLargeError):
            status_code = 413
        elif isinstance(exc, (ValidationError, UnreadableInputError)):
            status_code = 400
        else:
            status_code = 500
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={"error": type(exc).__name__, "detail": exc.message},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "filescope.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
