"""
FastAPI Application Setup

Main entry point for the HR application-status API.

Responsibility:
    - FastAPI app initialization
    - Resource lifecycle (database handle, Redis session store, mail transport)
    - Router registration (applications, notifications)
    - CORS middleware configuration
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration
    - Resources are opened in the lifespan, never at import time

Contains:
    - create_app() factory function
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint: GET /health
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from hr_tracker.api.routers import applications, notifications
from hr_tracker.api.schemas.common import ErrorResponse
from hr_tracker.application.ports.email_transport import EmailTransportProtocol
from hr_tracker.application.ports.session_store import SessionStoreProtocol
from hr_tracker.domain.shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainException,
    NotificationDeliveryError,
    PreconditionFailedError,
    TransientStoreError,
    ValidationError,
)
from hr_tracker.infrastructure.email.smtp_transport import SmtpEmailTransport
from hr_tracker.infrastructure.persistence.database.connection import Database
from hr_tracker.infrastructure.persistence.redis.connection import (
    close_client,
    create_redis_client,
    health_check as redis_health_check,
)
from hr_tracker.infrastructure.persistence.redis.session_store import RedisSessionStore
from hr_tracker.shared.config import Settings

API_VERSION = "0.1.0"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

# Most specific first; unmapped DomainException subclasses fall back to 400
EXCEPTION_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (PreconditionFailedError, status.HTTP_404_NOT_FOUND),
    (TransientStoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (NotificationDeliveryError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Attributes:
        status: "ok" when database and Redis respond, else "degraded"
        version: API version
        timestamp: Unix timestamp of health check
        database: "ok" or "unavailable"
        redis: "ok" or "unavailable"
    """

    status: str = "ok"
    version: str = API_VERSION
    timestamp: float
    database: str
    redis: str


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: PATCH /api/applications/mass-update"
        INFO: "Request completed: PATCH /api/applications/mass-update - 200 - 0.045s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")
    start_time = time.time()

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )
    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


def status_code_for(exc: DomainException) -> int:
    for exception_type, status_code in EXCEPTION_STATUS_CODES:
        if isinstance(exc, exception_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Catches all DomainException subclasses and converts them to HTTP error
    responses with the ErrorResponse body.

    Mapping:
        - ValidationError -> 400 Bad Request
        - AuthenticationError -> 401 Unauthorized
        - AuthorizationError -> 403 Forbidden
        - PreconditionFailedError -> 404 Not Found
        - TransientStoreError -> 500 Internal Server Error
        - NotificationDeliveryError -> 500 Internal Server Error
        - Other DomainException -> 400 Bad Request

    Examples:
        >>> raise PreconditionFailedError("No matching applications found", {...})
        >>> # Returns: 404 {"code": "PRECONDITION_FAILED", "message": "...", "details": {...}}
    """
    status_code = status_code_for(exc)
    error_response = ErrorResponse(code=exc.code, message=exc.message, details=exc.details())

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            f"Domain exception: {exc.__class__.__name__} - {exc.message} - "
            f"Request: {request.method} {request.url.path}",
            exc_info=exc,
        )
    else:
        logger.warning(
            f"Domain exception: {exc.__class__.__name__} - {exc.message} - "
            f"Request: {request.method} {request.url.path}"
        )

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(error_response.model_dump()),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """FastAPI request validation errors use the same 400 body as the gate."""
    error_response = ErrorResponse(
        code=ValidationError.code,
        message="Invalid request",
        details={"errors": jsonable_encoder(exc.errors())},
    )
    logger.warning(f"Request validation failed: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response.model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 Internal Server Error.
    Logs full stack trace for debugging.
    """
    error_response = ErrorResponse(
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"error": str(exc), "type": exc.__class__.__name__},
    )

    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response.model_dump(),
    )


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    session_store: Optional[SessionStoreProtocol] = None,
    email_transport: Optional[EmailTransportProtocol] = None,
) -> FastAPI:
    """
    FastAPI application factory.

    Any resource not passed in is built from settings when the app starts
    and released when it stops. Injected resources are used as-is and left
    open (tests own them).

    Args:
        settings: Runtime configuration (default: Settings.from_env())
        database: Database handle for the applications table
        session_store: Session token -> Caller lookup
        email_transport: Mail transport for notifications

    Usage:
        >>> app = create_app()
        >>> # uvicorn hr_tracker.api.main:app --reload
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned_database: Optional[Database] = None
        owned_redis = None

        app.state.settings = settings

        if database is None:
            owned_database = Database.from_settings(settings)
        app.state.database = database or owned_database

        if session_store is None:
            owned_redis = create_redis_client(settings, verify=False)
            app.state.session_store = RedisSessionStore(
                owned_redis, key_prefix=settings.session_key_prefix
            )
        else:
            app.state.session_store = session_store
        app.state.redis_client = owned_redis

        app.state.email_transport = email_transport or SmtpEmailTransport(settings)

        logger.info("Application resources initialized")
        try:
            yield
        finally:
            if owned_redis is not None:
                close_client(owned_redis)
            if owned_database is not None:
                await owned_database.dispose()
            logger.info("Application resources released")

    app = FastAPI(
        title="HR Application Tracker API",
        version=API_VERSION,
        description=(
            "Job application status transitions for HR staff and status "
            "notification emails to applicants."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Add CORS middleware (allow all origins for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Production: restrict to specific origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(request_logging_middleware)

    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(applications.router, prefix="/api")
    app.include_router(notifications.router, prefix="/api")

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        description="Database and Redis connectivity for monitoring and load balancers",
        tags=["health"],
    )
    async def health_check(request: Request) -> HealthCheckResponse:
        """
        Health check endpoint.

        Examples:
            >>> curl http://localhost:8000/health
            {
              "status": "ok",
              "version": "0.1.0",
              "timestamp": 1704976800.123,
              "database": "ok",
              "redis": "ok"
            }
        """
        database_ok = await request.app.state.database.health_check()

        redis_client = request.app.state.redis_client
        redis_ok = (
            await asyncio.to_thread(redis_health_check, redis_client)
            if redis_client is not None
            else False
        )

        return HealthCheckResponse(
            status="ok" if database_ok and redis_ok else "degraded",
            version=API_VERSION,
            timestamp=time.time(),
            database="ok" if database_ok else "unavailable",
            redis="ok" if redis_ok else "unavailable",
        )

    logger.info("FastAPI application created successfully")
    logger.info("Registered routers: /api/applications, /api/notifications")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Usage: uvicorn hr_tracker.api.main:app --reload
app = create_app()
