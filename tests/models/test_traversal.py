"""Unit tests for path traversal."""

import pytest

from dirtree.errors import DuplicateNameError, InvalidNameError, NoSuchPathError
from dirtree.traversal import create_at, resolve, split_path
from tests.fixtures.filesystem import create_directory


class TestSplitPath:
    """Test split_path()."""

    def test_empty_string_is_root(self):
        """Test that the empty path has no components."""
        assert split_path("") == []

    def test_single_component(self):
        """Test splitting a bare name."""
        assert split_path("a") == ["a"]

    def test_multiple_components(self):
        """Test splitting on the separator."""
        assert split_path("a/b/c") == ["a", "b", "c"]

    def test_empty_components_are_kept(self):
        """Test that leading and doubled separators produce empty components."""
        assert split_path("/") == ["", ""]
        assert split_path("/a") == ["", "a"]
        assert split_path("a//b") == ["a", "", "b"]


class TestResolve:
    """Test the read variant of traversal."""

    def test_empty_path_returns_start(self):
        """Test that resolving no components yields the starting directory."""
        root = create_directory(["a"])

        assert resolve(root, []) is root

    def test_resolves_nested_directory(self):
        """Test that each component descends one level."""
        root = create_directory(["a"])
        b = root.get_child("a").contents.create_child("b")

        assert resolve(root, ["a", "b"]) is b.contents

    def test_missing_first_component(self):
        """Test that a missing component raises with the whole remaining path."""
        root = create_directory(["a"])

        with pytest.raises(NoSuchPathError) as exc_info:
            resolve(root, ["x", "y"])

        assert exc_info.value.remaining == ["x", "y"]

    def test_missing_later_component_reports_suffix(self):
        """Test that the error carries the suffix starting at the failure."""
        root = create_directory(["a"])
        root.get_child("a").contents.create_child("b")

        with pytest.raises(NoSuchPathError) as exc_info:
            resolve(root, ["a", "b", "c", "d"])

        assert exc_info.value.remaining == ["c", "d"]
        assert "'c'" in str(exc_info.value)

    def test_resolve_does_not_mutate(self):
        """Test that a failed lookup creates nothing."""
        root = create_directory(["a"])

        with pytest.raises(NoSuchPathError):
            resolve(root, ["a", "missing"])

        assert root.list_paths() == ["a"]


class TestCreateAt:
    """Test the mutate variant of traversal."""

    def test_create_at_root(self):
        """Test creating with an empty parent path."""
        root = create_directory()

        entry = create_at(root, [], "a")

        assert entry.name == "a"
        assert root.list_paths() == ["a"]

    def test_create_at_nested_parent(self):
        """Test creating under a nested parent."""
        root = create_directory(["a"])
        root.get_child("a").contents.create_child("b")

        create_at(root, ["a", "b"], "c")

        assert root.list_paths() == ["a", "a/b", "a/b/c"]

    def test_create_at_missing_parent(self):
        """Test that an unresolvable parent raises NoSuchPathError."""
        root = create_directory(["a"])

        with pytest.raises(NoSuchPathError) as exc_info:
            create_at(root, ["a", "nope"], "c")

        assert exc_info.value.remaining == ["nope"]
        assert root.list_paths() == ["a"]

    def test_create_at_propagates_invalid_name(self):
        """Test that create_child's InvalidNameError reaches the caller."""
        root = create_directory(["a"])

        with pytest.raises(InvalidNameError):
            create_at(root, ["a"], "x/y")

    def test_create_at_propagates_duplicate_name(self):
        """Test that create_child's DuplicateNameError reaches the caller."""
        root = create_directory(["a"])
        root.get_child("a").contents.create_child("b")

        with pytest.raises(DuplicateNameError):
            create_at(root, ["a"], "b")
