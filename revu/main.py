"""
FastAPI Application Entry Point

This module creates and configures the review proxy application.
It sets up all routes, middleware, and exception handlers.

Design Decisions:
- Use lifespan events for startup/shutdown
- Fail fast when the AI vendor key is missing
- Add CORS middleware so the UI can be served from another origin
- Expose health check endpoints
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from revu import __version__
from revu.api import router as review_router
from revu.config import get_settings
from revu.logging_config import get_logger, setup_logging

# Initialize logging first
setup_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events for the application.
    """
    settings = get_settings()
    logger.info(
        "Starting RevU review proxy",
        host=settings.host,
        port=settings.port,
        model=settings.ai_model
    )

    try:
        settings.get_api_key()
        logger.info("Configuration validated successfully")
    except ValueError as e:
        logger.error(
            "Configuration validation failed",
            error=str(e)
        )
        raise

    yield

    logger.info("Shutting down RevU review proxy")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="RevU.ai",
        description="AI-powered code review proxy",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(review_router)

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "type": type(exc).__name__
            }
        )

    @app.get("/")
    async def root():
        """Root endpoint with basic info."""
        return {
            "name": "RevU.ai",
            "version": __version__,
            "status": "running",
            "docs": "/docs"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for load balancers and monitors."""
        return {
            "status": "healthy",
            "service": "revu",
            "version": __version__
        }

    @app.get("/ready")
    async def readiness_check():
        """
        Readiness check endpoint.

        Verifies that the AI vendor key is configured.
        """
        try:
            get_settings().get_api_key()
            return {
                "status": "ready",
                "service": "revu"
            }
        except ValueError as e:
            logger.error("Readiness check failed", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Not ready: {e}"
            )

    return app


# Create the application instance
app = create_app()
