"""
Employee Service - Main Application.

Serves CRUD operations over an in-memory collection of employee
records, binding handler inputs from route segments, query strings,
headers and JSON bodies.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from app import __version__
from app.config import Settings, settings as default_settings
from app.exceptions import EmployeeServiceException
from app.logging_config import configure_logging, get_logger
from app.middleware import RequestLoggingMiddleware
from app.repositories import InMemoryEmployeeRepository
from app.routes import header_lookup_router, router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Employee Service",
        version=__version__,
        employees=app.state.repository.count(),
    )

    yield

    logger.info("Employee Service stopped")


async def service_exception_handler(
    request: Request, exc: EmployeeServiceException
) -> PlainTextResponse:
    """Translate service exceptions into plain-text client errors."""
    logger.warning(
        "Request rejected",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        error=exc.message,
        **exc.details,
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": request.headers.get("X-Request-ID"),
        },
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the employee service application.

    Args:
        settings: Configuration to use (default: environment-derived settings)

    Returns:
        Configured FastAPI application owning a freshly seeded repository
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = FastAPI(
        title="Employee Service",
        description="CRUD operations over in-memory employee records",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.repository = InMemoryEmployeeRepository(
        enforce_unique_ids=settings.ENFORCE_UNIQUE_IDS
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(EmployeeServiceException, service_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(router)
    if settings.ENABLE_HEADER_LOOKUP:
        app.include_router(header_lookup_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.SERVICE_HOST,
        port=default_settings.SERVICE_PORT,
        reload=default_settings.DEBUG,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
