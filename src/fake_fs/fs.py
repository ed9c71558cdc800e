"""The fake filesystem — POSIX-style operations over an in-memory tree.

``FakeFs`` is the object code under test talks to.  It layers the
familiar verbs (``stat``, ``read_file``, ``mkdir``, ``rename`` …) on top
of the :class:`~fake_fs.tree.Tree` primitives, adding what a real
filesystem adds:

- **Existence and type checks** in a fixed order, each failing with the
  same POSIX code a real filesystem would use (see :mod:`fake_fs.errors`).
- **Timestamp updates** — adding or removing an entry sets ``mtime`` and
  ``ctime`` on the *parent* directory; appending to a file sets them on
  the file itself.  Reads never change timestamps, and overwriting an
  existing file with ``write_file`` leaves every timestamp alone so
  repeated identical writes have no visible side effects.
- **Two calling conventions** — every verb returns or raises directly,
  and has a ``<verb>_cb`` twin that delivers ``(error, result)`` to a
  continuation instead of raising.  The twins are generated by
  :func:`deferred`, so validation lives in one place.

Populating the tree before a test runs goes through ``declare_dir`` /
``declare_file`` (or the prefixed :class:`~fake_fs.builder.PathBuilder`
returned by ``at``).  Declarations insert directly into the tree: they
create missing parents and never touch parent timestamps.

Example::

    fs = FakeFs(FsConfig(cwd="/"))
    fs.declare_dir("home", mtime=100).declare_file("home/note.txt", "hi")
    fs.write_file("home/other.txt", "x")
    fs.readdir("home")            # ["note.txt", "other.txt"]
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable
from typing import Any, cast

from fake_fs.builder import PathBuilder
from fake_fs.config import FsConfig
from fake_fs.errors import ErrorCode, fs_error
from fake_fs.logging import Logger, LogLevel
from fake_fs.nodes import Directory, File, Node, StatResult
from fake_fs.options import Content, Options, resolve_encoding, to_bytes
from fake_fs.paths import PathArg, to_path, to_segments
from fake_fs.tree import Tree

Callback = Callable[[Exception | None, Any], object]

VERBS = (
    "exists",
    "stat",
    "readdir",
    "mkdir",
    "read_file",
    "write_file",
    "append_file",
    "rmdir",
    "unlink",
    "rename",
)
"""Names of the operations exposed in both calling conventions."""

CALLBACK_SUFFIX = "_cb"


def deferred(direct: Callable[..., Any]) -> Callable[..., None]:
    """Derive the callback form of a direct operation.

    The returned method takes the direct form's positional arguments
    followed by a continuation as the **last** positional argument.  It
    runs the direct form and calls ``callback(error, result)`` exactly
    once, synchronously, before returning.  Errors raised by the
    operation are delivered, never raised; errors raised by the
    continuation itself propagate to the caller.  A ``None``
    continuation discards the outcome.
    """

    @functools.wraps(direct)
    def call(self: FakeFs, *args: Any) -> None:
        if not args:
            msg = f"{direct.__name__}{CALLBACK_SUFFIX}() requires a callback argument"
            raise TypeError(msg)
        *params, callback = args
        callback = cast("Callback | None", callback)
        try:
            result = direct(self, *params)
        except Exception as exc:  # noqa: BLE001
            subject = self._subject(params[0]) if params else None
            self.logger.log(
                LogLevel.WARNING,
                f"{direct.__name__} failed: {exc}",
                source="fs",
                path=subject,
            )
            if callback is not None:
                callback(exc, None)
            return
        if callback is not None:
            callback(None, result)

    call.__name__ = f"{direct.__name__}{CALLBACK_SUFFIX}"
    call.__qualname__ = f"{direct.__qualname__}{CALLBACK_SUFFIX}"
    call.__doc__ = f"Callback form of ``{direct.__name__}``: ``(..., callback)``."
    return call


class FakeFs:
    """An in-memory filesystem with POSIX-style operations.

    Each instance owns an independent tree.  Instances are meant for
    single-threaded use; callers serialize access themselves if they
    share one across threads.
    """

    def __init__(self, config: FsConfig | None = None, logger: Logger | None = None) -> None:
        """Create a filesystem holding only an empty root directory.

        Args:
            config: Working directory, default encoding and clock.
            logger: Audit log to record events in (a fresh one if None).

        """
        self._config = config if config is not None else FsConfig()
        self._logger = logger if logger is not None else Logger()
        self._tree = Tree(clock=self._config.clock)

    @property
    def config(self) -> FsConfig:
        """Return this filesystem's configuration."""
        return self._config

    @property
    def logger(self) -> Logger:
        """Return the audit log."""
        return self._logger

    @property
    def tree(self) -> Tree:
        """Return the underlying tree engine."""
        return self._tree

    # -- Helpers ---------------------------------------------------------------

    def _segments(self, path: PathArg) -> list[str]:
        return to_segments(path, self._config.cwd)

    def _times(
        self,
        mtime: float | None = None,
        ctime: float | None = None,
        atime: float | None = None,
    ) -> dict[str, float]:
        """Return creation timestamps, with any overrides applied."""
        now = self._config.clock()
        return {
            "mtime": now if mtime is None else mtime,
            "ctime": now if ctime is None else ctime,
            "atime": now if atime is None else atime,
        }

    def _touch(self, node: Node) -> None:
        node.touch(self._config.clock())

    def _parent_dir(self, segments: list[str]) -> Directory:
        """Return the directory that holds *segments*' final entry.

        Raises:
            FsError: ``ENOENT`` if the parent is missing, ``ENOTDIR`` if
                it is a file.

        """
        parent = self._tree.get(segments[:-1])
        if not isinstance(parent, Directory):
            raise fs_error(ErrorCode.ENOTDIR, to_path(segments[:-1]))
        return parent

    def _record(self, message: str, segments: list[str]) -> None:
        self._logger.log(LogLevel.INFO, message, source="fs", path=to_path(segments))

    def _subject(self, path: object) -> str:
        """Return the absolute path a failed call was about, for the log."""
        try:
            return to_path(self._segments(cast("PathArg", path)))
        except (TypeError, ValueError, OSError):
            return str(path)

    # -- Declarations ------------------------------------------------------------

    def declare_dir(
        self,
        path: PathArg,
        *,
        mtime: float | None = None,
        ctime: float | None = None,
        atime: float | None = None,
    ) -> FakeFs:
        """Declare a directory, creating missing parents.

        Any existing entry at *path* is replaced.  Parent timestamps are
        not touched.

        Raises:
            BuildError: If a parent segment is a file, or *path* is the root.

        """
        segments = self._segments(path)
        node = Directory(**self._times(mtime, ctime, atime))
        self._tree.insert(segments, node)
        self._logger.log(
            LogLevel.DEBUG, "declare directory", source="builder", path=to_path(segments)
        )
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
    ) -> FakeFs:
        """Declare a file, creating missing parents.

        Text *content* is stored encoded with *encoding* (or the
        configured default); the *encoding* given here also becomes the
        file's default for reads.

        Raises:
            BuildError: If a parent segment is a file, or *path* is the root.

        """
        codec = resolve_encoding(encoding)
        segments = self._segments(path)
        node = File(
            content=to_bytes(content, codec, self._config.default_encoding),
            encoding=codec,
            **self._times(mtime, ctime, atime),
        )
        self._tree.insert(segments, node)
        self._logger.log(LogLevel.DEBUG, "declare file", source="builder", path=to_path(segments))
        return self

    def at(self, path: PathArg) -> PathBuilder:
        """Return a builder whose declarations are relative to *path*."""
        return PathBuilder(self, os.fspath(path))

    # -- Queries -----------------------------------------------------------------

    def exists(self, path: PathArg) -> bool:
        """Return True if something exists at *path*.  Never raises."""
        return self._tree.locate(self._segments(path)) is not None

    def stat(self, path: PathArg) -> StatResult:
        """Return a metadata snapshot for *path*.

        Raises:
            FsError: ``ENOENT`` if the path does not exist.

        """
        return self._tree.get(self._segments(path)).to_stat()

    def readdir(self, path: PathArg) -> list[str]:
        """List the names in a directory.

        Raises:
            FsError: ``ENOENT`` if the path does not exist, ``ENOTDIR``
                if it is a file.

        """
        segments = self._segments(path)
        node = self._tree.get(segments)
        if not isinstance(node, Directory):
            raise fs_error(ErrorCode.ENOTDIR, to_path(segments))
        return list(node.children)

    def read_file(self, path: PathArg, options: Options = None) -> bytes | str:
        """Return a file's content.

        Returns ``str`` when an encoding is given here or was recorded
        on the file, ``bytes`` otherwise.

        Raises:
            FsError: ``ENOENT`` if the path does not exist, ``EISDIR``
                if it is a directory.

        """
        encoding = resolve_encoding(options)
        segments = self._segments(path)
        node = self._tree.get(segments)
        if not isinstance(node, File):
            raise fs_error(ErrorCode.EISDIR, to_path(segments))
        return node.read(encoding)

    # -- Mutations ---------------------------------------------------------------

    def write_file(self, path: PathArg, data: Content, options: Options = None) -> None:
        """Create or replace a file's content.

        Creating a file updates the parent directory's timestamps;
        overwriting an existing file updates nothing.

        Raises:
            FsError: ``ENOENT`` if the parent is missing, ``ENOTDIR`` if
                the parent is a file, ``EISDIR`` if *path* is a directory.

        """
        encoding = resolve_encoding(options)
        content = to_bytes(data, encoding, self._config.default_encoding)
        segments = self._segments(path)
        if not segments:
            raise fs_error(ErrorCode.EISDIR, to_path(segments))
        parent = self._parent_dir(segments)
        existing = parent.children.get(segments[-1])

        if existing is None:
            self._touch(parent)
            self._tree.insert(segments, File(content=content, encoding=encoding, **self._times()))
            self._record("create file", segments)
            return
        if not isinstance(existing, File):
            raise fs_error(ErrorCode.EISDIR, to_path(segments))
        existing.content = content
        existing.encoding = encoding
        self._record("write file", segments)

    def append_file(self, path: PathArg, data: Content, options: Options = None) -> None:
        """Append to a file, creating it (as ``write_file``) if absent.

        Appending to an existing file updates the file's own timestamps
        and leaves its parent alone.

        Raises:
            FsError: ``EISDIR`` if *path* is a directory, plus anything
                ``write_file`` raises when the file is created.

        """
        encoding = resolve_encoding(options)
        segments = self._segments(path)
        node = self._tree.locate(segments)
        if node is None:
            self.write_file(path, data, encoding)
            return
        if not isinstance(node, File):
            raise fs_error(ErrorCode.EISDIR, to_path(segments))
        node.content += to_bytes(data, encoding, self._config.default_encoding)
        self._touch(node)
        self._record("append file", segments)

    def mkdir(self, path: PathArg, mode: int | None = None) -> None:  # noqa: ARG002
        """Create an empty directory.  *mode* is accepted and ignored.

        Raises:
            FsError: ``EEXIST`` if *path* exists, ``ENOENT`` if the parent
                is missing, ``ENOTDIR`` if the parent is a file.

        """
        segments = self._segments(path)
        if self._tree.locate(segments) is not None:
            raise fs_error(ErrorCode.EEXIST, to_path(segments))
        parent = self._parent_dir(segments)
        self._touch(parent)
        self._tree.insert(segments, Directory(**self._times()))
        self._record("mkdir", segments)

    def rmdir(self, path: PathArg) -> None:
        """Remove an empty directory.

        Raises:
            FsError: ``ENOENT`` if *path* does not exist, ``ENOTDIR`` if
                it is a file, ``ENOTEMPTY`` if it has children, ``EPERM``
                for the root.

        """
        segments = self._segments(path)
        node = self._tree.locate(segments)
        if node is None:
            raise fs_error(ErrorCode.ENOENT, to_path(segments))
        if not isinstance(node, Directory):
            raise fs_error(ErrorCode.ENOTDIR, to_path(segments))
        if node.children:
            raise fs_error(ErrorCode.ENOTEMPTY, to_path(segments))
        if not segments:
            raise fs_error(ErrorCode.EPERM, to_path(segments))
        self._touch(self._tree.get(segments[:-1]))
        self._tree.remove(segments)
        self._record("rmdir", segments)

    def unlink(self, path: PathArg) -> None:
        """Remove a file.

        Raises:
            FsError: ``ENOENT`` if *path* does not exist, ``EISDIR`` if it
                is a directory.

        """
        segments = self._segments(path)
        node = self._tree.locate(segments)
        if node is None:
            raise fs_error(ErrorCode.ENOENT, to_path(segments))
        if not isinstance(node, File):
            raise fs_error(ErrorCode.EISDIR, to_path(segments))
        self._touch(self._tree.get(segments[:-1]))
        self._tree.remove(segments)
        self._record("unlink", segments)

    def rename(self, old_path: PathArg, new_path: PathArg) -> None:
        """Move the node at *old_path* to *new_path*.

        An existing file at *new_path* is replaced.  Both parents get
        their timestamps updated.  The move is a remove followed by an
        insert and is not rolled back if the insert fails.

        Raises:
            FsError: ``ENOENT`` if *old_path* or *new_path*'s parent is
                missing, ``EPERM`` if *new_path* is an existing directory
                (or *old_path* is the root, or the move would put a
                directory inside itself), ``ENOTDIR`` if *new_path*'s
                parent is a file.

        """
        old = self._segments(old_path)
        new = self._segments(new_path)
        node = self._tree.locate(old)
        if node is None:
            raise fs_error(ErrorCode.ENOENT, to_path(old))
        if not old:
            raise fs_error(ErrorCode.EPERM, to_path(old))
        target = self._tree.locate(new)
        if target is not None and target.is_directory():
            raise fs_error(ErrorCode.EPERM, to_path(new))
        new_parent = self._parent_dir(new)
        if node.is_directory() and new[: len(old)] == old:
            raise fs_error(ErrorCode.EPERM, to_path(new))

        self._touch(self._tree.get(old[:-1]))
        self._tree.remove(old)
        self._touch(new_parent)
        self._tree.insert(new, node)
        self._record(f"rename from {to_path(old)}", new)

    # -- Callback forms ----------------------------------------------------------

    exists_cb = deferred(exists)
    stat_cb = deferred(stat)
    readdir_cb = deferred(readdir)
    mkdir_cb = deferred(mkdir)
    read_file_cb = deferred(read_file)
    write_file_cb = deferred(write_file)
    append_file_cb = deferred(append_file)
    rmdir_cb = deferred(rmdir)
    unlink_cb = deferred(unlink)
    rename_cb = deferred(rename)

    def method_table(self) -> dict[str, Callable[..., Any]]:
        """Return every operation, in both forms, bound to this instance.

        This is the surface an API-substitution facility binds onto a
        target namespace (see :mod:`fake_fs.patching`).
        """
        table: dict[str, Callable[..., Any]] = {}
        for verb in VERBS:
            table[verb] = getattr(self, verb)
            table[verb + CALLBACK_SUFFIX] = getattr(self, verb + CALLBACK_SUFFIX)
        return table
