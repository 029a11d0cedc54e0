"""Main entry point for the Directory Tree Simulator FastAPI application.

This module creates and configures the FastAPI app instance that serves the
simulated directory tree over REST.

To run the development server:
    uv run uvicorn main:app --reload

To run in production:
    uv run uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_system_state, shutdown_system_state
from api.exceptions import (
    duplicate_name_handler,
    generic_exception_handler,
    invalid_name_handler,
    no_such_path_handler,
    runtime_error_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import filesystem as filesystem_routes
from dirtree.errors import DuplicateNameError, InvalidNameError, NoSuchPathError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Creates the shared SystemState at startup and discards it at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    logger.info("Starting directory tree simulator")
    initialize_system_state()

    yield

    logger.info("Shutting down directory tree simulator")
    shutdown_system_state()


app = FastAPI(
    title="Directory Tree Simulator",
    description="API for simulating an in-memory directory hierarchy",
    version="0.1.0",
    lifespan=lifespan,
)

# Register exception handlers
# Specific exceptions before general ones
app.add_exception_handler(InvalidNameError, invalid_name_handler)
app.add_exception_handler(DuplicateNameError, duplicate_name_handler)
app.add_exception_handler(NoSuchPathError, no_such_path_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(RuntimeError, runtime_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(filesystem_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message.

    Returns:
        A dictionary with a welcome message.
    """
    return {
        "message": "Welcome to the Directory Tree Simulator API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring.

    Returns:
        A dictionary indicating the service is healthy.
    """
    return {"status": "healthy"}
