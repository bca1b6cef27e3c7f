# Main application entry point
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from . import __version__
from .api import (
    attachments_router,
    auth_router,
    categories_router,
    health_router,
    notes_router,
    search_router,
    sync_router,
)
from .config import get_settings
from .core.exceptions import AppError, InternalFailure, ValidationError
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse, HealthResponse
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Notes API",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # Allow tests to skip touching the real DB (e.g., when using SQLite in-memory)
    if os.getenv("NOTESAPI_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTESAPI_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Notes API")


app = FastAPI(
    title="Notes API",
    description="Personal notes with categories, attachments and offline sync",
    version=__version__,
    lifespan=lifespan,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("Request failed", extra={"path": request.url.path, "error": exc.message})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed or invalid bodies are a 400 with a stable code, never a 422
    logger.debug("Validation failed", extra={"path": request.url.path, "errors": len(exc.errors())})
    error = ValidationError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error", extra={"path": request.url.path}, exc_info=exc)
    error = InternalFailure()
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error.to_dict())


# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

# Include routers
app.include_router(auth_router, prefix=settings.api_prefix)
app.include_router(notes_router, prefix=settings.api_prefix)
app.include_router(attachments_router, prefix=settings.api_prefix)
app.include_router(categories_router, prefix=settings.api_prefix)
app.include_router(search_router, prefix=settings.api_prefix)
app.include_router(sync_router, prefix=settings.api_prefix)
app.include_router(health_router, prefix=settings.api_prefix)


# Unprefixed health endpoint for load balancers
@app.get("/health", response_model=HealthResponse, tags=["health"])
async def basic_health():
    return HealthResponse(status="ok", time=datetime.now(timezone.utc))


# Uploaded attachments, served read-only
app.mount("/files", StaticFiles(directory=settings.storage_dir, check_dir=False), name="files")


def run():
    """Console entry point."""
    import uvicorn

    uvicorn.run("notesapi.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
