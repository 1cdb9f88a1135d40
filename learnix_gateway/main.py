"""Main FastAPI application for the Learnix code execution gateway."""

# Standard library imports
from contextlib import asynccontextmanager

# Third-party imports
import structlog
import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

# Local application imports
from ._version import __version__
from .api import code_execution, exercises, health
from .config import settings
from .dependencies.services import get_runner_client
from .middleware import RequestLoggingMiddleware
from .models.errors import GatewayException
from .utils.error_handlers import (
    gateway_exception_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .utils.logging import setup_logging

setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Learnix code execution gateway",
        version=__version__,
        runner_base_url=settings.runner_base_url,
        runner_timeout_seconds=settings.runner_timeout_seconds,
        module_mocks=settings.enable_module_mocks,
    )

    if settings.api_key == "learnix-dev-api-key":
        logger.warning("Using default API key - CHANGE THIS IN PRODUCTION!")

    if settings.api_debug:
        logger.warning("Debug mode is enabled - disable in production")

    yield

    logger.info("Shutting down Learnix code execution gateway")
    try:
        await get_runner_client().close()
    except Exception as e:
        logger.error("Error closing Runner client", error=str(e))


app = FastAPI(
    title="Learnix Code Execution Gateway",
    description="Runs and grades learner code on a remote multi-language Runner",
    version=__version__,
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url="/redoc" if settings.enable_docs else None,
    debug=settings.api_debug,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

if settings.enable_cors:
    origins = settings.cors_origins if settings.cors_origins else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["x-request-id"],
    )
    logger.info("CORS enabled", origins=origins)

# Register global error handlers
app.add_exception_handler(GatewayException, gateway_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router, tags=["health"])
app.include_router(code_execution.router, prefix="/code-execution", tags=["code-execution"])
app.include_router(exercises.router, prefix="/exercises", tags=["exercises"])


def run_server():
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        "learnix_gateway.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run_server()
