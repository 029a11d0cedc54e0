"""Filesystem endpoints.

Provides REST API access to the simulated directory tree: creating
directories, changing the working directory and listing paths.
"""

from fastapi import APIRouter

from api.dependencies import SystemStateDep
from api.models import (
    ActionResponse,
    CwdResponse,
    ErrorResponse,
    FileSystemStateResponse,
    PathRequest,
    PathsResponse,
)

router = APIRouter(
    prefix="/filesystem",
    tags=["filesystem"],
)


# Route Handlers


@router.get("/state", response_model=FileSystemStateResponse)
async def get_filesystem_state(state: SystemStateDep):
    """Get the complete state of the simulated system.

    Returns:
        FileSystemStateResponse: Working directory, every path and a
            flat list of directory nodes.
    """
    return FileSystemStateResponse(**state.get_snapshot())


@router.get("/paths", response_model=PathsResponse)
async def list_paths(state: SystemStateDep):
    """List every directory path in depth-first pre-order.

    The listing always covers the whole tree, whatever the working directory.

    Returns:
        PathsResponse: All directory paths.
    """
    paths = state.paths()
    return PathsResponse(paths=paths, count=len(paths))


@router.get("/cwd", response_model=CwdResponse)
async def get_cwd(state: SystemStateDep):
    """Get the working directory and the directories below it.

    Returns:
        CwdResponse: Working directory and the full paths beneath it.
    """
    return CwdResponse(cwd=list(state.cwd), pwd=state.pwd(), paths=state.cwd_paths())


@router.post(
    "/mkdir",
    response_model=ActionResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def make_directory(request: PathRequest, state: SystemStateDep):
    """Create a directory.

    Every component but the last must already exist.

    Args:
        request: Path of the new directory.
        state: The system state dependency.

    Returns:
        ActionResponse: Confirmation of the new directory.
    """
    entry = state.mkdir(request.path, relative=request.relative)

    return ActionResponse(
        status="created",
        message=f"Created directory '{entry.name}'",
        cwd=state.pwd(),
        directory_count=state.directory_count,
    )


@router.post(
    "/chdir",
    response_model=ActionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def change_directory(request: PathRequest, state: SystemStateDep):
    """Change the working directory.

    Args:
        request: Path of the new working directory.
        state: The system state dependency.

    Returns:
        ActionResponse: The new working directory.
    """
    state.chdir(request.path, relative=request.relative)

    return ActionResponse(
        status="changed",
        message=f"Working directory is now '{state.pwd()}'",
        cwd=state.pwd(),
        directory_count=state.directory_count,
    )


@router.post("/clear", response_model=ActionResponse)
async def clear_filesystem(state: SystemStateDep):
    """Discard the whole tree and return to the root.

    Returns:
        ActionResponse: Confirmation that the tree is empty.
    """
    state.clear()

    return ActionResponse(
        status="cleared",
        message="Directory tree cleared",
        cwd=state.pwd(),
        directory_count=state.directory_count,
    )
