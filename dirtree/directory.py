"""Directory and entry models for the in-memory directory tree."""

from typing import Iterator

from pydantic import BaseModel, Field

from dirtree.errors import DuplicateNameError, InvalidNameError

SEPARATOR = "/"


def validate_name(name: str) -> str:
    """Check that a name can label a directory.

    Args:
        name: Candidate directory name.

    Returns:
        The name, unchanged.

    Raises:
        InvalidNameError: If the name is empty or contains the separator.
    """
    if not name or SEPARATOR in name:
        raise InvalidNameError(name)
    return name


def join_path(prefix: str, name: str) -> str:
    """Append a name to an accumulated path."""
    if not prefix:
        return name
    return f"{prefix}{SEPARATOR}{name}"


class Directory(BaseModel):
    """The contents of one folder.

    Children are kept in creation order. No two children share a name; this is
    enforced by create_child(), which is the only way entries should be added.

    Args:
        entries: Child entries in insertion order.
    """

    entries: list["Entry"] = Field(
        default_factory=list, description="Child entries in insertion order"
    )

    def get_child(self, name: str) -> "Entry | None":
        """Find the direct child with exactly this name.

        Args:
            name: Name to look for.

        Returns:
            The matching Entry, or None if no child has that name.
        """
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def names(self) -> list[str]:
        """Return the names of the direct children in insertion order."""
        return [entry.name for entry in self.entries]

    def create_child(self, name: str) -> "Entry":
        """Create a new, empty subdirectory at the end of this directory.

        Args:
            name: Name of the new subdirectory.

        Returns:
            The newly created Entry.

        Raises:
            InvalidNameError: If name is empty or contains the separator.
            DuplicateNameError: If a child with this name already exists.
        """
        validate_name(name)
        if self.get_child(name) is not None:
            raise DuplicateNameError(name)

        entry = Entry(name=name)
        self.entries.append(entry)
        return entry

    def list_paths(self, prefix: str = "") -> list[str]:
        """List the path of every directory below this one.

        Paths are produced in depth-first pre-order: each directory comes
        before its descendants and siblings follow insertion order.

        Args:
            prefix: Accumulated path of the ancestors of this directory.

        Returns:
            Full paths joined with the separator.
        """
        return [path for path, _, _ in self.walk(prefix)]

    def walk(self, prefix: str = "") -> Iterator[tuple[str, int, "Entry"]]:
        """Visit every entry below this directory in depth-first pre-order.

        Uses an explicit stack, so the depth of the tree is not bounded by
        the interpreter's recursion limit.

        Args:
            prefix: Accumulated path of the ancestors of this directory.

        Yields:
            Tuples of (full path, depth, entry). Direct children have depth 1.
        """
        pending = [(prefix, 1, entry) for entry in reversed(self.entries)]
        while pending:
            parent_path, depth, entry = pending.pop()
            path = join_path(parent_path, entry.name)
            yield path, depth, entry
            pending.extend(
                (path, depth + 1, child) for child in reversed(entry.contents.entries)
            )

    @property
    def is_empty(self) -> bool:
        return not self.entries


class Entry(BaseModel):
    """A named folder: a name bound to the directory holding its contents.

    Args:
        name: Directory name, immutable once created.
        contents: The subdirectory owned by this entry.
    """

    name: str = Field(frozen=True, description="Directory name")
    contents: Directory = Field(
        default_factory=Directory, description="Contents of this directory"
    )

    def list_paths(self, prefix: str = "") -> list[str]:
        """List this entry's path followed by the paths of everything under it.

        Args:
            prefix: Accumulated path of this entry's ancestors.

        Returns:
            Full paths in depth-first pre-order.
        """
        path = join_path(prefix, self.name)
        return [path] + self.contents.list_paths(path)


Directory.model_rebuild()
Entry.model_rebuild()
