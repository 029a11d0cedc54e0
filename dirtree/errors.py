"""Errors raised by directory tree operations.

Every fallible operation raises one of the three concrete classes below.
Callers distinguish failures by class, never by message text.
"""


class DirTreeError(Exception):
    """Base class for all directory tree errors."""


class InvalidNameError(DirTreeError):
    """Raised when a candidate directory name is empty or contains the separator.

    Args:
        name: The rejected name or path component.
        path: The full path the name came from, when it was part of one.
    """

    def __init__(self, name: str, path: str | None = None):
        self.name = name
        self.path = name if path is None else path
        if name:
            super().__init__(f"'{name}': slash in name is invalid")
        elif path:
            super().__init__(f"'{path}': empty component in path")
        else:
            super().__init__("empty name is invalid")


class DuplicateNameError(DirTreeError):
    """Raised when a directory already has a child with the requested name.

    Args:
        name: The name that already exists.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"'{name}': directory exists")


class NoSuchPathError(DirTreeError):
    """Raised when a path component does not resolve during traversal.

    Args:
        remaining: The unresolved components, starting with the one that failed.
    """

    def __init__(self, remaining: list[str]):
        self.remaining = list(remaining)
        component = self.remaining[0] if self.remaining else ""
        super().__init__(f"'{component}': invalid element in path")
