"""Exception handlers for the VTS FastAPI application.

This module defines custom exception handlers that convert Python exceptions
into consistent, user-friendly JSON responses.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from models.errors import ERROR_MESSAGES, FilesystemError

logger = logging.getLogger(__name__)


# Custom Exception Classes


class SessionNotFoundError(Exception):
    """Raised when a requested shell session doesn't exist.

    Args:
        session_id: The id that wasn't found.
    """

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session '{session_id}' not found")


# Exception Handlers


async def session_not_found_handler(request: Request, exc: SessionNotFoundError):
    """Handle SessionNotFoundError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The SessionNotFoundError exception.

    Returns:
        JSONResponse with 404 status.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Session Not Found",
            "detail": f"The session '{exc.session_id}' does not exist",
            "session_id": exc.session_id,
            "suggestion": "Create a session with POST /sessions",
        },
    )


async def filesystem_error_handler(request: Request, exc: FilesystemError):
    """Handle FilesystemError exceptions raised outside the interpreter.

    The interpreter renders filesystem failures as transcript lines; this
    handler only covers direct inspection endpoints.

    Args:
        request: The incoming request that triggered the error.
        exc: The FilesystemError exception.

    Returns:
        JSONResponse with 404 status and the error kind.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Path Error",
            "detail": f"{exc.path}: {ERROR_MESSAGES[exc.kind]}",
            "path": exc.path,
            "type": exc.kind.value,
        },
    )


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle Pydantic validation errors.

    Args:
        request: The incoming request that triggered the error.
        exc: The ValidationError exception.

    Returns:
        JSONResponse with validation error details.
    """
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Validation Error",
            "detail": "The request data failed validation",
            "validation_errors": exc.errors(include_url=False, include_context=False),
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

    This is a catch-all handler for unexpected errors. It prevents
    stack traces from being exposed to clients.

    Args:
        request: The incoming request that triggered the error.
        exc: The exception that was raised.

    Returns:
        JSONResponse with generic error message.
    """
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
            "type": type(exc).__name__,
        },
    )
