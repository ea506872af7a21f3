"""Main entry point for the Virtual Terminal Simulator (VTS) FastAPI application.

This module creates and configures the FastAPI app instance that serves the
REST API a terminal front end uses to drive simulated shell sessions.

To run the development server:
    uv run uvicorn main:app --reload

To run in production:
    uv run uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_session_registry, shutdown_session_registry
from api.exceptions import (
    SessionNotFoundError,
    filesystem_error_handler,
    generic_exception_handler,
    runtime_error_handler,
    session_not_found_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import sessions as sessions_routes
from models.errors import FilesystemError

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Loads a .env file (for VTS_* settings), creates the session registry at
    startup and discards every session at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    load_dotenv()
    logger.info("Starting VTS - initializing SessionRegistry")
    initialize_session_registry()

    yield

    logger.info("Shutting down VTS - discarding sessions")
    shutdown_session_registry()


app = FastAPI(
    title="Virtual Terminal Simulator (VTS)",
    description="API for driving simulated shell sessions over an in-memory filesystem",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Order matters: specific exceptions before general ones
app.add_exception_handler(SessionNotFoundError, session_not_found_handler)
app.add_exception_handler(FilesystemError, filesystem_error_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(RuntimeError, runtime_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(sessions_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": "Welcome to the Virtual Terminal Simulator API",
        "version": APP_VERSION,
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
