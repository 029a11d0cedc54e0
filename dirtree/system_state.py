"""Simulated operating system state: a directory tree and a working directory."""

import logging
from typing import Any

from pydantic import BaseModel, Field

from dirtree.directory import SEPARATOR, Directory, Entry, join_path, validate_name
from dirtree.errors import InvalidNameError, NoSuchPathError
from dirtree.traversal import create_at, resolve, split_path

logger = logging.getLogger(__name__)


class SystemState(BaseModel):
    """The simulated system: a root directory plus a current working directory.

    The cwd is stored as a list of name components from the root and always
    resolves against the tree. Operations validate their input before
    changing anything, so a failed call leaves both the tree and the cwd as
    they were.

    Paths given to mkdir() and chdir() are resolved from the root unless
    relative=True is passed, in which case they are resolved from the cwd.

    Args:
        root: The root directory. The root itself has no name.
        cwd: Components of the current working directory (empty at root).
        update_count: Number of successful mkdir/chdir operations.
    """

    root: Directory = Field(
        default_factory=Directory, description="The root directory"
    )
    cwd: list[str] = Field(
        default_factory=list,
        description="Components of the current working directory",
    )
    update_count: int = Field(
        default=0, description="Number of successful mkdir/chdir operations"
    )

    def _base(self, relative: bool) -> list[str]:
        return list(self.cwd) if relative else []

    def mkdir(self, path: str, relative: bool = False) -> Entry:
        """Create a directory.

        Every component but the last must already exist; the last one is the
        name of the new directory.

        Args:
            path: Separator-joined path of the directory to create.
            relative: Resolve the path from the cwd instead of the root.

        Returns:
            The created Entry.

        Raises:
            InvalidNameError: If any component is empty. This covers a
                leading separator such as "/" or "/a": the root cannot be
                named.
            NoSuchPathError: If a parent component does not exist.
            DuplicateNameError: If the directory already exists.
        """
        components = split_path(path)
        if not components or any(component == "" for component in components):
            logger.warning(f"mkdir rejected invalid path '{path}'")
            raise InvalidNameError("", path=path)

        parent = self._base(relative) + components[:-1]
        entry = create_at(self.root, parent, components[-1])

        self.update_count += 1
        logger.info(f"Created directory '{SEPARATOR.join(parent + [entry.name])}'")
        return entry

    def chdir(self, path: str, relative: bool = False) -> None:
        """Change the current working directory.

        The empty string is the root. On failure the cwd is left unchanged.

        Args:
            path: Separator-joined path of the new working directory.
            relative: Resolve the path from the cwd instead of the root.

        Raises:
            NoSuchPathError: If any component of the path does not exist.
        """
        target = self._base(relative) + split_path(path)
        try:
            resolve(self.root, target)
        except NoSuchPathError:
            logger.warning(f"chdir to '{path}' failed, cwd stays '{self.pwd()}'")
            raise

        self.cwd = target
        self.update_count += 1
        logger.info(f"Changed working directory to '{self.pwd()}'")

    def paths(self) -> list[str]:
        """List every directory path in the tree in depth-first pre-order.

        The result does not depend on the cwd.
        """
        return self.root.list_paths("")

    def pwd(self) -> str:
        """Return the cwd as a separator-joined path ("" at the root)."""
        return SEPARATOR.join(self.cwd)

    def cwd_paths(self) -> list[str]:
        """List the full paths of every directory below the cwd."""
        return resolve(self.root, self.cwd).list_paths(self.pwd())

    @property
    def directory_count(self) -> int:
        """Number of directories in the tree, not counting the root."""
        return len(self.paths())

    def get_snapshot(self) -> dict[str, Any]:
        """Return a complete snapshot of the current state.

        Returns:
            JSON-serializable dictionary with the cwd, every path and a
            flat pre-order list of nodes.
        """
        return {
            "cwd": list(self.cwd),
            "pwd": self.pwd(),
            "paths": self.paths(),
            "directory_count": self.directory_count,
            "update_count": self.update_count,
            "nodes": [
                {
                    "path": path,
                    "name": entry.name,
                    "depth": depth,
                    "children": entry.contents.names(),
                }
                for path, depth, entry in self.root.walk()
            ],
        }

    def validate_state(self) -> list[str]:
        """Validate internal consistency and return any issues.

        Checks for:
        - Names that are empty or contain the separator
        - Sibling directories sharing a name
        - A cwd that no longer resolves

        Returns:
            List of validation error messages (empty list if valid).
        """
        issues = []

        pending: list[tuple[str, Directory]] = [("", self.root)]
        while pending:
            prefix, directory = pending.pop()
            seen: set[str] = set()
            for entry in directory.entries:
                try:
                    validate_name(entry.name)
                except InvalidNameError:
                    issues.append(
                        f"Invalid name '{entry.name}' under '{prefix or SEPARATOR}'"
                    )
                if entry.name in seen:
                    issues.append(
                        f"Duplicate name '{entry.name}' under '{prefix or SEPARATOR}'"
                    )
                seen.add(entry.name)
                path = join_path(prefix, entry.name)
                pending.append((path, entry.contents))

        try:
            resolve(self.root, self.cwd)
        except NoSuchPathError as e:
            issues.append(f"Working directory '{self.pwd()}' does not resolve: {e}")

        return issues

    def clear(self) -> None:
        """Discard the whole tree and return to the root."""
        self.root = Directory()
        self.cwd = []
        self.update_count = 0
        logger.info("Directory tree cleared")
