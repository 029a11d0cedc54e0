"""Exception handlers for the directory tree FastAPI application.

This module converts directory tree errors and other Python exceptions
into consistent, user-friendly JSON responses.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from dirtree.errors import DuplicateNameError, InvalidNameError, NoSuchPathError

logger = logging.getLogger(__name__)


# Directory tree error handlers
# One per error kind so clients can tell them apart by status code


async def invalid_name_handler(request: Request, exc: InvalidNameError):
    """Handle InvalidNameError exceptions.

    Returns a 400 naming the rejected directory name.

    Args:
        request: The incoming request that triggered the error.
        exc: The InvalidNameError exception.

    Returns:
        JSONResponse with 400 status.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Name",
            "detail": str(exc),
            "name": exc.name,
            "path": exc.path,
        },
    )


async def duplicate_name_handler(request: Request, exc: DuplicateNameError):
    """Handle DuplicateNameError exceptions.

    Returns a 409 (Conflict) since the directory already exists.

    Args:
        request: The incoming request that triggered the error.
        exc: The DuplicateNameError exception.

    Returns:
        JSONResponse with 409 status.
    """
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "error": "Duplicate Name",
            "detail": str(exc),
            "name": exc.name,
        },
    )


async def no_such_path_handler(request: Request, exc: NoSuchPathError):
    """Handle NoSuchPathError exceptions.

    Returns a 404 with the path components that could not be resolved.

    Args:
        request: The incoming request that triggered the error.
        exc: The NoSuchPathError exception.

    Returns:
        JSONResponse with 404 status and the unresolved components.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "No Such Path",
            "detail": str(exc),
            "remaining": exc.remaining,
        },
    )


# Generic handlers


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with validation error details.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": exc.errors(include_url=False),
        },
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValueError exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid Value",
            "detail": str(exc),
            "type": "ValueError",
        },
    )


async def runtime_error_handler(request: Request, exc: RuntimeError):
    """Handle RuntimeError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The RuntimeError exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Runtime Error",
            "detail": str(exc),
            "type": "RuntimeError",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    Logs the full traceback and returns a generic message so stack traces
    are never exposed to clients.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with generic error message.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )
