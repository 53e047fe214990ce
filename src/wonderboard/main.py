# src/wonderboard/main.py

"""Main FastAPI application for Wonderboard."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from . import config
from .api import game, player, stats, wonder
from .api.deps import get_file_repository
from .db.session import create_schema, engine
from .exceptions import (
    ConflictError,
    ResourceNotFoundError,
    SnapshotIntegrityError,
    StorageError,
    ValidationError,
    WonderboardError,
)
from .middleware.logging import RequestLoggingMiddleware

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown events."""
    if config.STORAGE_BACKEND not in config.SUPPORTED_BACKENDS:
        raise RuntimeError(
            f"Unsupported STORAGE_BACKEND {config.STORAGE_BACKEND!r}, "
            f"expected one of {config.SUPPORTED_BACKENDS}"
        )

    # Startup: prepare the configured backend
    if config.STORAGE_BACKEND == "file":
        get_file_repository()
    else:
        await create_schema()
    logger.info("Wonderboard started", extra={"backend": config.STORAGE_BACKEND})

    yield

    # Shutdown: Dispose of database connections gracefully
    await engine.dispose()


app = FastAPI(title="Wonderboard API", lifespan=lifespan)

# Add middleware (order matters - first added = outermost)
app.add_middleware(RequestLoggingMiddleware)


# =============================================================================
# Global Exception Handlers
# =============================================================================


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        ctx_error = error.get("ctx", {}).get("error")
        # Custom validators raise ValueError; show their text without the prefix
        message = str(ctx_error) if ctx_error is not None else error["msg"]
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies and parameters -> 400."""
    message = _format_validation_errors(exc)
    logger.warning("Request validation failed: %s", message)
    return JSONResponse(
        status_code=400,
        content={"detail": message, "error_type": "ValidationError"},
    )


@app.exception_handler(ResourceNotFoundError)
async def resource_not_found_handler(
    request: Request, exc: ResourceNotFoundError
) -> JSONResponse:
    """Handle all resource not found errors -> 404."""
    logger.warning("Resource not found: %s", exc.message, extra=exc.details)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.message, "error_type": type(exc).__name__},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Handle all validation errors -> 400."""
    logger.warning("Validation error: %s", exc.message, extra=exc.details)
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "error_type": type(exc).__name__},
    )


@app.exception_handler(ConflictError)
async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    """Handle duplicate names and blocked deletes -> 400."""
    logger.warning("Conflict: %s", exc.message, extra=exc.details)
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "error_type": type(exc).__name__},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Handle persistence failures -> 500 without leaking internals."""
    logger.error("Storage error: %s", exc.message, extra=exc.details, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "A storage error occurred",
            "error_type": type(exc).__name__,
        },
    )


@app.exception_handler(SnapshotIntegrityError)
async def snapshot_integrity_handler(
    request: Request, exc: SnapshotIntegrityError
) -> JSONResponse:
    """Handle corrupted stored records -> 500, IDs stay in the log."""
    logger.error("Stored data integrity error: %s", exc.message, extra=exc.details)
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Stored game data is inconsistent",
            "error_type": type(exc).__name__,
        },
    )


@app.exception_handler(WonderboardError)
async def wonderboard_error_handler(
    request: Request, exc: WonderboardError
) -> JSONResponse:
    """Catch-all for any other Wonderboard errors -> 500."""
    logger.error(
        "Wonderboard error: %s", exc.message, extra=exc.details, exc_info=True
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An internal error occurred",
            "error_type": type(exc).__name__,
        },
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Handle database integrity constraint violations."""
    error_msg = str(exc.orig) if exc.orig else str(exc)
    logger.warning("Database integrity error: %s", error_msg)
    return JSONResponse(
        status_code=400,
        content={"detail": "Database constraint violation"},
    )


@app.exception_handler(SQLAlchemyError)
async def sqlalchemy_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Catch-all for other SQLAlchemy database errors."""
    logger.error("Database error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal database error occurred"},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred"},
    )


# Include routers into the main application
app.include_router(wonder.router)
app.include_router(player.router)
app.include_router(game.router)
app.include_router(stats.router)


@app.get("/", tags=["Root"])
async def read_root() -> dict[str, str]:
    """Provides a welcome message."""
    return {"message": "Welcome to the Wonderboard API"}


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for monitoring."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
