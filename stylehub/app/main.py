"""Main FastAPI application entry point.

This module serves as the primary entry point for the StyleHub application.
It handles all core application setup including:
- FastAPI application initialization and configuration
- Middleware setup for CORS, correlation ids and request logging
- Database lifecycle: the store handle is created and migrated before the
  application serves requests, and disposed on shutdown
- Route registration and API versioning
- Exception handlers rendering every error as ``{"error": message}``
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import AppException
from app.core.logging import CorrelationMiddleware, RequestLoggingMiddleware, get_logger, setup_logging
from app.database.session import init_database

logger = get_logger(__name__)


def _format_request_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        label = ".".join(loc) or "body"
        messages.append(f"{label}: {error.get('msg', 'is invalid')}")
    return ", ".join(messages)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    Handles all application setup including middleware, routes, and error handlers.
    """
    settings = settings or get_settings()
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Handle application startup and shutdown events.
        The store handle exists only between these two points.
        """
        logger.info("Starting up application...", environment=settings.ENVIRONMENT.value)
        app.state.database = await init_database(settings)
        try:
            yield
        finally:
            logger.info("Shutting down application...")
            await app.state.database.close()
            logger.info("Cleanup completed")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Styling occasions, wardrobes and partner catalogues",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/api/docs" if not settings.PROD else None,
        redoc_url="/api/redoc" if not settings.PROD else None,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    if settings.FEATURES.ENABLE_REQUEST_LOGGING:
        app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle custom application exceptions"""
        if exc.status_code >= 500:
            logger.error("Request failed", error=exc, path=request.url.path)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are reported like any other validation error"""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _format_request_errors(exc)}
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception", error=exc, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Internal server error"}
        )

    # Register routers
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    return app


# Create the application instance
app = create_application()

# Only run the server directly in development
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=not settings.PROD,
        log_level="debug" if settings.DEBUG else "info"
    )
