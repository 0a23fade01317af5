"""
FastAPI application factory and main app configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .adapters.db.storage import create_storage_backend
from .api.errors import APIError
from .api.routers import admin, appointment, doctor, health, hospital, patient, rating
from .api.schemas.common import ErrorResponse
from .core.config import Settings, get_settings
from .core.exceptions import MediLinkException
from .core.structured_logger import configure_logging
from .middleware.performance_middleware import PerformanceMiddleware
from .middleware.request_id_middleware import RequestIDMiddleware

logger = logging.getLogger("medilink")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env}, storage backend: {settings.storage.backend}")

    # Storage backend is selected once here and never switched per call
    storage = create_storage_backend(settings)
    try:
        await storage.open()
    except Exception as e:
        logger.error(f"Storage initialization failed: {type(e).__name__}: {e}", exc_info=True)
        raise
    app.state.storage = storage

    try:
        yield
    finally:
        logger.info(f"Shutting down {settings.app_name}")
        await storage.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title="MediLink API",
        description="Healthcare appointment booking backend",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
        max_age=600,
    )
    app.add_middleware(PerformanceMiddleware)
    # Added last so it runs first and the request ID is set for everything else
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router)
    app.include_router(admin.router)
    app.include_router(doctor.router)
    app.include_router(patient.router)
    app.include_router(hospital.router)
    app.include_router(appointment.router)
    app.include_router(rating.router)

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        req_id = getattr(request.state, "request_id", None)
        logger.warning(f"APIError: {exc.code} ({exc.http_status}) {exc.message} | request_id={req_id}")
        return JSONResponse(
            status_code=exc.http_status,
            content=ErrorResponse(
                error=exc.code,
                message=exc.message,
                request_id=req_id or "",
                details=exc.details or {},
            ).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def pydantic_error_handler(request: Request, exc: RequestValidationError):
        req_id = getattr(request.state, "request_id", None)
        error_details = exc.errors()
        logger.warning(f"ValidationError on {request.method} {request.url.path}: {error_details} | request_id={req_id}")

        error_messages = []
        for error in error_details:
            loc = " -> ".join(str(x) for x in error.get("loc", []))
            msg = error.get("msg", "Validation error")
            error_messages.append(f"{loc}: {msg}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="INVALID_INPUT",
                message=f"Input validation failed: {'; '.join(error_messages)}",
                request_id=req_id or "",
                details={"errors": [{"loc": list(e.get("loc", [])), "msg": e.get("msg", "")} for e in error_details], "path": request.url.path},
            ).model_dump(),
        )

    # Store failures (unique violations, lost connections) are passed through as-is
    @app.exception_handler(MediLinkException)
    async def store_error_handler(request: Request, exc: MediLinkException):
        req_id = getattr(request.state, "request_id", None)
        logger.error(f"{exc.error_code}: {exc.message} | request_id={req_id}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=exc.error_code or "INTERNAL_ERROR",
                message=exc.message,
                request_id=req_id or "",
                details=exc.details,
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.error(f"Unhandled error: {type(exc)} | request_id={req_id}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="INTERNAL_ERROR",
                message="An unexpected error has occurred. Please try again later.",
                request_id=req_id or "",
            ).model_dump(),
        )

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
            "storage_backend": settings.storage.backend,
            "status": "running",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "admins": "/admin",
                "doctors": "/doctor",
                "patients": "/patient",
                "hospitals": "/hospital",
                "appointments": "/appointment",
                "ratings": "/rating",
            },
        }

    return app


app = create_app()
