"""Shared request and response models for API endpoints."""

from pydantic import BaseModel, Field


class PathRequest(BaseModel):
    """Request naming a path in the simulated tree.

    Attributes:
        path: Separator-joined path ("" is the root).
        relative: Resolve the path from the current working directory
            instead of from the root.
    """

    path: str = Field(description="Separator-joined path")
    relative: bool = Field(
        default=False, description="Resolve from the working directory"
    )


class ActionResponse(BaseModel):
    """Response model for endpoints that change the simulated system.

    Attributes:
        status: Outcome of the action.
        message: Human-readable message describing the result.
        cwd: Working directory after the action.
        directory_count: Number of directories after the action.
    """

    status: str
    message: str
    cwd: str
    directory_count: int


class ErrorResponse(BaseModel):
    """Standard error response model.

    Attributes:
        error: Error type.
        detail: Human-readable error message.
        name: Rejected or conflicting directory name (name errors only).
        path: Full path the rejected name came from (invalid names only).
        remaining: Path components that did not resolve (missing paths only).
    """

    error: str
    detail: str
    name: str | None = None
    path: str | None = None
    remaining: list[str] | None = None


class DirectoryNode(BaseModel):
    """One directory in a state snapshot.

    Attributes:
        path: Full path of the directory.
        name: Directory name.
        depth: Nesting level, 1 for directories directly under the root.
        children: Names of the direct children in creation order.
    """

    path: str
    name: str
    depth: int
    children: list[str]


class FileSystemStateResponse(BaseModel):
    """Response containing the full state snapshot.

    Attributes:
        cwd: Components of the working directory.
        pwd: Working directory as a path string.
        paths: Every directory path in depth-first pre-order.
        directory_count: Number of directories, not counting the root.
        update_count: Number of successful mkdir/chdir operations.
        nodes: Every directory in depth-first pre-order.
    """

    cwd: list[str]
    pwd: str
    paths: list[str]
    directory_count: int
    update_count: int
    nodes: list[DirectoryNode]


class PathsResponse(BaseModel):
    """Response listing directory paths.

    Attributes:
        paths: Directory paths in depth-first pre-order.
        count: Number of paths returned.
    """

    paths: list[str]
    count: int


class CwdResponse(BaseModel):
    """Response describing the working directory and everything below it.

    Attributes:
        cwd: Components of the working directory.
        pwd: Working directory as a path string.
        paths: Paths of the directories below the working directory.
    """

    cwd: list[str]
    pwd: str
    paths: list[str]
