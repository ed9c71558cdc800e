"""Tests for path resolution.

Resolution is purely textual: a path string becomes the list of child
names leading to it from the root.
"""

import os
from pathlib import PurePosixPath

import pytest

from fake_fs.paths import resolve, to_path, to_segments


class TestRoot:
    """Verify root handling."""

    def test_root_is_empty(self) -> None:
        """The literal root should map to no segments."""
        assert to_segments("/") == []

    def test_root_ignores_cwd(self) -> None:
        """The root short-circuits before the working directory is used."""
        assert to_segments("/", cwd="/somewhere/else") == []

    def test_dotdot_above_root_stays_at_root(self) -> None:
        """Climbing above the root stays at the root."""
        assert to_segments("/../..") == []


class TestAbsolute:
    """Verify absolute path normalization."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/a", ["a"]),
            ("/a/b/c.txt", ["a", "b", "c.txt"]),
            ("/a/b/", ["a", "b"]),
            ("//a///b", ["a", "b"]),
            ("/a/./b", ["a", "b"]),
            ("/a/x/../b", ["a", "b"]),
        ],
    )
    def test_normalization(self, path: str, expected: list[str]) -> None:
        """Redundant separators, '.' and '..' should be normalized away."""
        assert to_segments(path) == expected


class TestRelative:
    """Verify relative paths are resolved against the working directory."""

    def test_joined_to_cwd(self) -> None:
        """A relative path should land under cwd."""
        assert to_segments("b/c", cwd="/a") == ["a", "b", "c"]

    def test_dotdot_climbs_out_of_cwd(self) -> None:
        """'..' in a relative path should climb above cwd."""
        assert to_segments("../x", cwd="/a/b") == ["a", "x"]

    def test_dot_is_cwd(self) -> None:
        """'.' should resolve to cwd itself."""
        assert to_segments(".", cwd="/a") == ["a"]

    def test_root_cwd(self) -> None:
        """With cwd at the root, relative paths are top-level."""
        assert to_segments("home", cwd="/") == ["home"]

    def test_default_cwd_is_process_cwd(self) -> None:
        """Without cwd, relative paths resolve against os.getcwd()."""
        expected = [p for p in os.getcwd().split("/") if p] + ["x"]
        assert to_segments("x") == expected


class TestHelpers:
    """Verify resolve() and to_path()."""

    def test_resolve_returns_absolute_string(self) -> None:
        """resolve() should produce a normalized absolute path."""
        assert resolve("b/../c", cwd="/a") == "/a/c"

    def test_resolve_root(self) -> None:
        """resolve('/') is '/'."""
        assert resolve("/") == "/"

    def test_path_like_accepted(self) -> None:
        """pathlib paths should be accepted."""
        assert to_segments(PurePosixPath("/a/b")) == ["a", "b"]

    def test_to_path_round_trip(self) -> None:
        """to_path() should join segments into an absolute path."""
        assert to_path(["a", "b"]) == "/a/b"
        assert to_path([]) == "/"
