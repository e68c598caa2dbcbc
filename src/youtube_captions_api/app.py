"""Main FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from youtube_captions.core.config import setup_logging
from youtube_captions.core.errors import ErrorKind, InternalError

from .config import get_api_config
from .middleware import setup_middleware
from .api.models.base import HealthResponse, HealthStatus
from .exceptions import APIError, ValidationError


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Args:
        app: FastAPI application instance
    """
    # Startup
    setup_logging()
    config = app.state.api_config
    logger.info("Starting YouTube Captions API...")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Debug mode: {config.debug}")

    yield

    # Shutdown
    logger.info("Shutting down YouTube Captions API...")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    config = get_api_config()

    app = FastAPI(
        title=config.title,
        description=config.description,
        version=config.version,
        debug=config.debug,
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None
    )
    app.state.api_config = config

    setup_middleware(app)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            data=HealthStatus(
                status="healthy",
                version=config.version,
                environment=config.environment
            )
        )

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            "message": config.title,
            "version": config.version,
            "docs": "/docs" if config.debug else "Documentation disabled in production"
        }

    # Exception handlers
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        """Render API errors into the error envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(include_details=config.debug)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Report malformed request bodies as invalid input."""
        error = ValidationError("Invalid request body", debug_detail=str(exc.errors()))
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_dict(include_details=config.debug)
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        """Last-resort handler for unclassified failures."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        error = APIError(
            InternalError.default_message,
            status_code=500,
            error_code=ErrorKind.INTERNAL.value,
            debug_detail=f"{type(exc).__name__}: {exc}"
        )
        return JSONResponse(
            status_code=error.status_code,
            content=error.to_dict(include_details=config.debug)
        )

    from .api.routers import health, transcript

    app.include_router(
        health.router,
        prefix="/api/v1",
        tags=["Health"]
    )

    app.include_router(
        transcript.router,
        prefix="/api/youtube",
        tags=["Transcripts"]
    )

    logger.info("FastAPI application created successfully")
    return app


if __name__ == "__main__":
    import uvicorn

    config = get_api_config()
    uvicorn.run(
        "youtube_captions_api.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower()
    )
