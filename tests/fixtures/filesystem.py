"""Fixtures for directory trees and system states."""

import pytest

from dirtree.directory import Directory
from dirtree.system_state import SystemState


def create_directory(names: list[str] | None = None) -> Directory:
    """Create a Directory with the given direct children.

    Args:
        names: Child names to create, in order.

    Returns:
        Directory instance ready for testing.
    """
    directory = Directory()
    for name in names or []:
        directory.create_child(name)
    return directory


def create_system_state(paths: list[str] | None = None, cwd: str = "") -> SystemState:
    """Create a SystemState with the given directories already made.

    Args:
        paths: Directory paths to mkdir, in order. Parents must come first.
        cwd: Path to chdir into after the directories are created.

    Returns:
        SystemState instance ready for testing.
    """
    state = SystemState()
    for path in paths or []:
        state.mkdir(path)
    if cwd:
        state.chdir(cwd)
    return state


def create_deep_state(depth: int) -> SystemState:
    """Create a SystemState holding a single chain of nested "d" directories.

    Args:
        depth: Number of directories in the chain.

    Returns:
        SystemState whose cwd is the root.
    """
    state = SystemState()
    current = state.root
    for _ in range(depth):
        current = current.create_child("d").contents
    return state


# Pre-built tree layouts
PROJECT_LAYOUT = [
    "home",
    "home/alice",
    "home/alice/docs",
    "home/bob",
    "tmp",
    "usr",
    "usr/bin",
]

NESTED_PATHS = ["/".join(f"d{i}" for i in range(depth)) for depth in range(1, 11)]

# Deeper than the default interpreter recursion limit
DEEP_TREE_DEPTH = 1200


@pytest.fixture
def empty_state():
    """Provide a SystemState with an empty tree.

    Returns:
        A freshly created SystemState.
    """
    return SystemState()


@pytest.fixture
def project_state():
    """Provide a SystemState populated with PROJECT_LAYOUT.

    Returns:
        A SystemState whose cwd is the root.
    """
    return create_system_state(PROJECT_LAYOUT)
