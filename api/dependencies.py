"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared SessionRegistry and to individual sessions.
"""

import logging
from typing import Annotated

from fastapi import Depends

from api.exceptions import SessionNotFoundError
from models.config import ShellConfig
from models.shell import SessionRegistry, ShellSession

logger = logging.getLogger(__name__)


# Global state
# Sessions are memory-resident and disappear when the app shuts down
_session_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry:
    """Get the shared SessionRegistry instance.

    This function is a FastAPI dependency. Add it to a route handler's
    parameters and FastAPI will inject the registry.

    Returns:
        The shared SessionRegistry instance.

    Raises:
        RuntimeError: If the registry hasn't been initialized yet.

    Example:
        @router.get("/some-endpoint")
        async def my_handler(registry: SessionRegistryDep):
            return {"sessions": registry.list_ids()}
    """
    if _session_registry is None:
        raise RuntimeError(
            "SessionRegistry not initialized. Call initialize_session_registry() first."
        )

    return _session_registry


def initialize_session_registry(config: ShellConfig | None = None) -> SessionRegistry:
    """Initialize the shared SessionRegistry instance.

    This should be called once when the FastAPI app starts up.

    Args:
        config: Shell configuration for new sessions. Defaults to a config
            built from VTS_* environment variables.

    Returns:
        The newly created SessionRegistry instance.
    """
    global _session_registry

    _session_registry = SessionRegistry(config=config or ShellConfig.from_env())
    logger.info(
        f"SessionRegistry initialized for host '{_session_registry.config.host_label}'"
    )

    return _session_registry


def shutdown_session_registry() -> None:
    """Discard every session and the registry itself.

    This should be called when the FastAPI app shuts down.
    """
    global _session_registry

    if _session_registry is not None:
        _session_registry.clear()

    _session_registry = None


# Type alias for dependency injection
SessionRegistryDep = Annotated[SessionRegistry, Depends(get_session_registry)]


def get_shell_session(session_id: str, registry: SessionRegistryDep) -> ShellSession:
    """Resolve the session_id path parameter to a ShellSession.

    Args:
        session_id: Session identifier from the URL path.
        registry: The shared SessionRegistry.

    Returns:
        The matching ShellSession.

    Raises:
        SessionNotFoundError: If no session has that id.
    """
    try:
        return registry.get(session_id)
    except KeyError:
        raise SessionNotFoundError(session_id)


ShellSessionDep = Annotated[ShellSession, Depends(get_shell_session)]
