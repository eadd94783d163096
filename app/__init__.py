"""Story and quiz services application package.

This package contains the core application components:
- services: registry of the four service processes
- models: Pydantic response models
- routers: API route handlers
- utils: logging helpers
"""

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.models import ErrorResponse
from app.routers import health_router
from app.services import ServiceDefinition
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from config import Settings

__version__ = "0.1.0"

logger = get_logger("app")


def create_app(service: ServiceDefinition, settings: "Settings") -> FastAPI:
    """Build the HTTP application for one service.

    No business routes are registered, so every path answers 404 unless the
    health probe is enabled. CORS preflights are answered only when
    ``allowed_origins`` is configured.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Starting {service.display_name}",
            extra={"service": service.name, "environment": settings.environment},
        )
        yield
        logger.info(f"Shutting down {service.display_name}")

    app = FastAPI(
        title=service.display_name,
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.service = service.name
    app.state.environment = settings.environment

    if settings.allowed_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins_list,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
        )

    if settings.health_check_enabled:
        app.include_router(health_router)

    app.add_exception_handler(Exception, global_exception_handler)
    return app


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled errors.

    Logs the error and returns a generic message. Never exposes internal
    error details to clients.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    body = ErrorResponse(
        error="internal_error",
        message="An unexpected error occurred. Please try again.",
    )
    return JSONResponse(status_code=500, content=body.model_dump())
