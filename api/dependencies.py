"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared SystemState.
"""

from typing import Annotated

from fastapi import Depends

from dirtree.system_state import SystemState


# Global state
# One simulated system per process, created when the app starts
_system_state: SystemState | None = None


def get_system_state() -> SystemState:
    """Get the shared SystemState instance.

    This function is a FastAPI dependency. Tests replace it through
    app.dependency_overrides to inject their own state.

    Returns:
        The shared SystemState instance.

    Raises:
        RuntimeError: If the state hasn't been initialized yet.
    """
    if _system_state is None:
        raise RuntimeError(
            "SystemState not initialized. Call initialize_system_state() first."
        )

    return _system_state


def initialize_system_state() -> SystemState:
    """Initialize the shared SystemState with an empty tree.

    Returns:
        The newly created SystemState instance.
    """
    global _system_state

    _system_state = SystemState()
    return _system_state


def shutdown_system_state() -> None:
    """Discard the shared SystemState."""
    global _system_state

    _system_state = None


# Type alias for dependency injection
SystemStateDep = Annotated[SystemState, Depends(get_system_state)]
