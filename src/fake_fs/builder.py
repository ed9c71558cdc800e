"""Path-prefixed declarations.

``fs.at("project")`` returns a :class:`PathBuilder` that prepends
``project/`` to every path it is given, so a nested fixture reads like
the tree it builds::

    (fs.at("project")
        .declare_file("README.md", "# demo")
        .declare_dir("src")
        .at("src/pkg")
            .declare_file("__init__.py", ""))

The builder owns a reference to its filesystem and an accumulated
prefix.  ``declare_*`` return the same builder; ``at`` returns a new
one with a longer prefix.  The filesystem itself is only changed by the
inserts.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from fake_fs.paths import PathArg

if TYPE_CHECKING:
    from fake_fs.fs import FakeFs
    from fake_fs.options import Content, Options


def join(prefix: str, path: PathArg) -> str:
    """Append *path* to *prefix*, even when *path* starts with ``/``."""
    tail = os.fspath(path).lstrip("/")
    if not tail:
        return prefix
    return f"{prefix.rstrip('/')}/{tail}" if prefix else tail


class PathBuilder:
    """Declare directories and files beneath a fixed path prefix."""

    def __init__(self, fs: FakeFs, prefix: str) -> None:
        """Create a builder declaring into *fs* beneath *prefix*."""
        self._fs = fs
        self._prefix = prefix

    @property
    def fs(self) -> FakeFs:
        """Return the filesystem this builder declares into."""
        return self._fs

    @property
    def prefix(self) -> str:
        """Return the prefix prepended to every path."""
        return self._prefix

    def declare_dir(
        self,
        path: PathArg,
        *,
        mtime: float | None = None,
        ctime: float | None = None,
        atime: float | None = None,
    ) -> PathBuilder:
        """Declare a directory at ``prefix/path`` and return this builder."""
        self._fs.declare_dir(join(self._prefix, path), mtime=mtime, ctime=ctime, atime=atime)
        return self

    def declare_file(
        self,
        path: PathArg,
        content: Content = None,
        encoding: Options = None,
        *,
        mtime: float | None = None,
        ctime: float | None = None,
        atime: float | None = None,
    ) -> PathBuilder:
        """Declare a file at ``prefix/path`` and return this builder."""
        self._fs.declare_file(
            join(self._prefix, path),
            content,
            encoding,
            mtime=mtime,
            ctime=ctime,
            atime=atime,
        )
        return self

    def at(self, path: PathArg) -> PathBuilder:
        """Return a new builder for ``prefix/path``."""
        return PathBuilder(self._fs, join(self._prefix, path))

    def __repr__(self) -> str:
        """Show the prefix, e.g. ``PathBuilder('project/src')``."""
        return f"{type(self).__name__}({self._prefix!r})"
