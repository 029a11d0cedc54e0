"""In-memory directory tree simulator."""

from dirtree.directory import SEPARATOR, Directory, Entry
from dirtree.errors import (
    DirTreeError,
    DuplicateNameError,
    InvalidNameError,
    NoSuchPathError,
)
from dirtree.system_state import SystemState
from dirtree.traversal import create_at, resolve, split_path

__all__ = [
    "SEPARATOR",
    "Directory",
    "Entry",
    "SystemState",
    "DirTreeError",
    "DuplicateNameError",
    "InvalidNameError",
    "NoSuchPathError",
    "create_at",
    "resolve",
    "split_path",
]
