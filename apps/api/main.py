"""FastAPI application main entry point."""

import time
import uuid
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.api.v1.endpoints import orders
from core.application.dtos.order_dto import ErrorResponse, ValidationErrorDetail
from core.domain.exceptions import DomainError, NotFoundError
from core.infrastructure.database.config import close_database, init_database
from core.infrastructure.logging import configure_logging, get_logger
from core.settings import get_app_settings


CORRELATION_HEADER = "X-Correlation-ID"

settings = get_app_settings()

configure_logging(settings.api.log_level, settings.api.log_format)
logger = get_logger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.api.title,
    description="Order Processing API: create orders and look them up by order number.",
    version=settings.api.version,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[CORRELATION_HEADER, "Location"],
)

# Include routers
app.include_router(orders.router, prefix="/api")


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing and tag them with a correlation id."""
    correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
    request.state.correlation_id = correlation_id
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path} [{correlation_id}]")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s) [{correlation_id}]"
    )

    response.headers[CORRELATION_HEADER] = correlation_id
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

def _error_response(
    request: Request,
    status_code: int,
    title: str,
    message: str,
    errors: Optional[List[ValidationErrorDetail]] = None,
) -> JSONResponse:
    """Build a JSONResponse carrying an ErrorResponse body."""
    correlation_id = getattr(request.state, "correlation_id", None)
    body = ErrorResponse(
        title=title,
        message=message,
        status_code=status_code,
        errors=errors or [],
        trace_id=correlation_id,
        request_path=request.url.path,
        request_method=request.method,
    )
    headers = {CORRELATION_HEADER: correlation_id} if correlation_id else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body/path validation failures.

    Returns:
        400 JSONResponse listing every field error
    """
    errors = [
        ValidationErrorDetail(
            field=".".join(str(part) for part in error["loc"] if part != "body") or "body",
            message=error["msg"],
        )
        for error in exc.errors()
    ]
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {len(errors)} error(s)")
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        "One or more validation errors occurred",
        errors,
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Handle NotFoundError exceptions."""
    return _error_response(request, status.HTTP_404_NOT_FOUND, "Resource not found", exc.message)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle business rule violations (invalid argument or state)."""
    logger.warning(f"Domain error on {request.method} {request.url.path}: {exc.message}")
    return _error_response(request, status.HTTP_400_BAD_REQUEST, "Invalid request", exc.message)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions.

    The exception text is only exposed in development.
    """
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    message = str(exc) if settings.api.is_development else "An unexpected error occurred"
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", message
    )


# =============================================================================
# LIFECYCLE EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Create tables on startup."""
    logger.info(f"Starting {settings.api.title} v{settings.api.version} ({settings.api.environment})")
    await init_database()


@app.on_event("shutdown")
async def shutdown_event():
    """Dispose the engine on shutdown."""
    await close_database()
    logger.info("Shutdown complete")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.api.title,
        "version": settings.api.version,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
