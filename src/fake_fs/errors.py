"""Error taxonomy — POSIX-style failures raised by the fake filesystem.

Real filesystems report failures as small integer codes (``errno``) with
symbolic names: ``ENOENT`` for "no such file or directory", ``EISDIR``
for "is a directory", and so on.  Code under test usually branches on
either the symbolic code or the Python exception class, so we provide
both:

- **ErrorCode** — the closed set of codes the fake filesystem can raise.
- **FsError** — an ``OSError`` carrying ``code``, ``errno``, a message,
  and the offending path.
- **Concrete subclasses** — each also derives from the matching builtin
  (``FileNotFoundError`` etc.), so ``except FileNotFoundError`` works
  exactly as it would against the real filesystem.

``BuildError`` is separate: it signals misuse of the declaration API
(e.g. declaring ``a/b`` when ``a`` is a file), not a filesystem failure.
"""

from __future__ import annotations

import errno
from enum import StrEnum


class ErrorCode(StrEnum):
    """Symbolic POSIX error codes raised by filesystem operations."""

    ENOENT = "ENOENT"
    ENOTDIR = "ENOTDIR"
    EISDIR = "EISDIR"
    EEXIST = "EEXIST"
    ENOTEMPTY = "ENOTEMPTY"
    EPERM = "EPERM"

    @property
    def errno(self) -> int:
        """Return the host's numeric errno for this code."""
        return int(getattr(errno, self.value))

    @property
    def description(self) -> str:
        """Return the short human-readable meaning of this code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[ErrorCode, str] = {
    ErrorCode.ENOENT: "no such file or directory",
    ErrorCode.ENOTDIR: "not a directory",
    ErrorCode.EISDIR: "illegal operation on a directory",
    ErrorCode.EEXIST: "file already exists",
    ErrorCode.ENOTEMPTY: "directory not empty",
    ErrorCode.EPERM: "operation not permitted",
}


class FsError(OSError):
    """Raise when a filesystem operation fails.

    Attributes:
        code: The symbolic error code (``ErrorCode.ENOENT`` etc.).

    The standard ``OSError`` attributes are populated too: ``errno``,
    ``strerror`` and ``filename``.

    """

    def __init__(self, code: ErrorCode, path: str | None = None) -> None:
        """Create an error for *code*, optionally naming the *path* involved."""
        message = f"{code.value}, {code.description}"
        if path is None:
            super().__init__(code.errno, message)
        else:
            super().__init__(code.errno, message, path)
        self.code = code

    def __str__(self) -> str:
        """Format like Node's fs errors: ``ENOENT, no such ... 'path'``."""
        if self.filename is None:
            return str(self.strerror)
        return f"{self.strerror} '{self.filename}'"


class NoEntryError(FsError, FileNotFoundError):
    """The referenced path does not exist."""


class NotADirError(FsError, NotADirectoryError):
    """A directory was expected but something else was found."""


class IsADirError(FsError, IsADirectoryError):
    """A file was expected but a directory was found."""


class AlreadyExistsError(FsError, FileExistsError):
    """The creation target already exists."""


class NotEmptyError(FsError):
    """A directory removal was attempted on a non-empty directory."""


class NotPermittedError(FsError, PermissionError):
    """The operation is refused (e.g. renaming onto a directory)."""


_ERROR_CLASSES: dict[ErrorCode, type[FsError]] = {
    ErrorCode.ENOENT: NoEntryError,
    ErrorCode.ENOTDIR: NotADirError,
    ErrorCode.EISDIR: IsADirError,
    ErrorCode.EEXIST: AlreadyExistsError,
    ErrorCode.ENOTEMPTY: NotEmptyError,
    ErrorCode.EPERM: NotPermittedError,
}


def fs_error(code: ErrorCode, path: str | None = None) -> FsError:
    """Build the exception matching *code*, ready to be raised."""
    return _ERROR_CLASSES[code](code, path)


class BuildError(RuntimeError):
    """Raise when the tree cannot be built as declared."""
