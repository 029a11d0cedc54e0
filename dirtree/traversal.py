"""Path traversal over nested directories.

One walk is shared by two entry points:
- resolve(): read-only lookup, used to validate a chdir target or to locate a
  subtree whose paths will be listed.
- create_at(): locates a parent directory and creates a child in it.
"""

import logging
from typing import Sequence

from dirtree.directory import SEPARATOR, Directory, Entry
from dirtree.errors import NoSuchPathError

logger = logging.getLogger(__name__)


def split_path(path: str) -> list[str]:
    """Split a path string into its components.

    The empty string is the root and has no components. No other
    normalization happens, so empty components are kept for the caller to
    reject.

    Args:
        path: Separator-joined path.

    Returns:
        List of name components.
    """
    if path == "":
        return []
    return path.split(SEPARATOR)


def _walk(start: Directory, components: Sequence[str]) -> Directory:
    current = start
    for index, component in enumerate(components):
        entry = current.get_child(component)
        if entry is None:
            logger.debug(f"Traversal stopped at '{component}' (step {index})")
            raise NoSuchPathError(list(components[index:]))
        current = entry.contents
    return current


def resolve(start: Directory, components: Sequence[str]) -> Directory:
    """Locate the directory at a path without modifying anything.

    Args:
        start: Directory the path is relative to.
        components: Path components to follow. Empty means start itself.

    Returns:
        The directory reached.

    Raises:
        NoSuchPathError: If a component has no matching child. The error
            carries the unresolved suffix of the path.
    """
    return _walk(start, components)


def create_at(start: Directory, components: Sequence[str], name: str) -> Entry:
    """Create a new subdirectory under the directory at a path.

    Args:
        start: Directory the path is relative to.
        components: Path of the parent directory.
        name: Name of the subdirectory to create.

    Returns:
        The created Entry.

    Raises:
        NoSuchPathError: If the parent path does not resolve.
        InvalidNameError: If name is empty or contains the separator.
        DuplicateNameError: If the parent already has a child with this name.
    """
    parent = _walk(start, components)
    return parent.create_child(name)
