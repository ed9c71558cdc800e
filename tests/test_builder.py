"""Tests for path-prefixed declarations through ``FakeFs.at``."""

import pytest

from fake_fs.builder import PathBuilder, join
from fake_fs.config import FsConfig
from fake_fs.errors import BuildError
from fake_fs.fs import FakeFs


def _fs() -> FakeFs:
    """Create a filesystem rooted at cwd "/"."""
    return FakeFs(FsConfig(cwd="/"))


class TestJoin:
    """Verify prefix joining."""

    @pytest.mark.parametrize(
        ("prefix", "path", "expected"),
        [
            ("a", "b", "a/b"),
            ("/a/", "b", "/a/b"),
            ("a", "/b", "a/b"),
            ("/", "b", "/b"),
            ("a", "", "a"),
            ("", "b", "b"),
        ],
    )
    def test_join(self, prefix: str, path: str, expected: str) -> None:
        """The path is always appended, even when it starts with '/'."""
        assert join(prefix, path) == expected


class TestPathBuilder:
    """Verify declarations beneath a prefix."""

    def test_at_returns_builder(self) -> None:
        """at() returns a builder, not the filesystem."""
        fs = _fs()
        builder = fs.at("/project")
        assert isinstance(builder, PathBuilder)
        assert builder.fs is fs
        assert builder.prefix == "/project"

    def test_declarations_are_prefixed(self) -> None:
        """Declared paths land beneath the prefix."""
        fs = _fs()
        fs.at("/project").declare_file("README.md", "# demo").declare_dir("src")
        assert fs.read_file("/project/README.md", "utf-8") == "# demo"
        assert fs.stat("/project/src").is_directory()

    def test_declarations_chain_on_same_builder(self) -> None:
        """declare_* return the same builder."""
        builder = _fs().at("/p")
        assert builder.declare_dir("a") is builder
        assert builder.declare_file("f", "") is builder

    def test_nested_at(self) -> None:
        """at() on a builder extends the prefix in a new builder."""
        fs = _fs()
        outer = fs.at("/project")
        inner = outer.at("src/pkg")
        inner.declare_file("__init__.py", "")
        assert inner is not outer
        assert inner.prefix == "/project/src/pkg"
        assert outer.prefix == "/project"
        assert fs.exists("/project/src/pkg/__init__.py")

    def test_absolute_path_is_still_prefixed(self) -> None:
        """A leading slash does not escape the prefix."""
        fs = _fs()
        fs.at("/jail").declare_file("/etc/passwd", "x")
        assert fs.exists("/jail/etc/passwd")
        assert not fs.exists("/etc/passwd")

    def test_overrides_pass_through(self) -> None:
        """Timestamp overrides and encodings reach the filesystem."""
        fs = _fs()
        fs.at("/p").declare_dir("d", mtime=5).declare_file("f", "é", "latin-1", atime=9)
        expected_mtime = 5
        expected_atime = 9
        assert fs.stat("/p/d").mtime == expected_mtime
        assert fs.stat("/p/f").atime == expected_atime
        assert fs.read_file("/p/f") == "é"

    def test_relative_prefix_uses_cwd(self) -> None:
        """A relative prefix resolves against the filesystem's cwd."""
        fs = FakeFs(FsConfig(cwd="/home/user"))
        fs.at("proj").declare_file("f", "")
        assert fs.exists("/home/user/proj/f")

    def test_builder_errors_propagate(self) -> None:
        """Declaring beneath a file through a builder is still a BuildError."""
        fs = _fs()
        fs.declare_file("/p", "")
        with pytest.raises(BuildError):
            fs.at("/p").declare_file("x", "")

    def test_repr(self) -> None:
        """The repr shows the prefix."""
        assert repr(_fs().at("/p")) == "PathBuilder('/p')"
