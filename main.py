"""Applicant Checks - FastAPI Application Entry Point

Serves the address and identity checks over HTTP for local invocation.
The same handlers run unchanged as workflow steps.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.routers.checks import router as checks_router
from app.utils import configure_logging
from config import settings

configure_logging()
logger = logging.getLogger("applicant_checks")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    logger.info(
        f"Starting {settings.service_name}",
        extra={"environment": settings.environment, "port": settings.port},
    )
    logger.info(f"Port: {settings.port}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"PII redaction: {'on' if settings.redact_pii else 'off'}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.service_name}")


app = FastAPI(
    title="Applicant Checks",
    description="Address and identity validation steps",
    version=settings.version,
    lifespan=lifespan,
)

app.include_router(checks_router)


@app.get("/")
async def root():
    """Root endpoint - basic service status."""
    return {"service": settings.service_name, "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancer probes."""
    return {
        "status": "healthy",
        "version": settings.version,
        "environment": settings.environment,
    }


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors.

    Logs the error and returns a generic message without internal details.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )
