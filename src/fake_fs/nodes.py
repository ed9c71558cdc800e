"""Node model — the directories and files that make up the fake tree.

Models just enough of a Unix filesystem for tests to be fooled:

- **Directory**: owns a ``dict[str, Node]`` mapping child names to
  child nodes.  Ownership is exclusive — a node has exactly one parent,
  so removing a directory discards its whole subtree.

- **File**: owns its content as raw ``bytes`` plus an optional default
  encoding used when a reader asks for text without naming a codec.

- **Timestamps**: every node carries ``mtime``, ``ctime`` and ``atime``
  as epoch seconds.  Any timestamp not given at construction defaults
  to the creation instant.

Unlike an inode-based design, names live in the parent's ``children``
mapping and nodes are the objects themselves — there are no inode
numbers, hard links, or symlinks to track.
"""

from __future__ import annotations

import stat as stat_bits
from dataclasses import dataclass, field
from enum import StrEnum
from time import time
from typing import ClassVar


class FileType(StrEnum):
    """The kind of object a node represents."""

    FILE = "file"
    DIRECTORY = "directory"


_MODE_BITS: dict[FileType, int] = {
    FileType.FILE: stat_bits.S_IFREG,
    FileType.DIRECTORY: stat_bits.S_IFDIR,
}


@dataclass(eq=False)
class Node:
    """Common base for directories and files.

    ``eq=False`` keeps identity semantics: two empty directories are
    still different nodes.

    Timestamps left unset are filled from the wall clock, not from any
    ``FsConfig.clock``.  ``FakeFs`` and ``Tree`` always pass explicit
    times, so only nodes built directly see the wall clock.
    """

    mtime: float | None = None
    ctime: float | None = None
    atime: float | None = None

    file_type: ClassVar[FileType] = FileType.FILE

    def __post_init__(self) -> None:
        """Fill any timestamp left unset with the wall-clock creation instant."""
        now = time()
        for name in ("mtime", "ctime", "atime"):
            if getattr(self, name) is None:
                setattr(self, name, now)

    def is_directory(self) -> bool:
        """Return True if this node is a directory."""
        return self.file_type is FileType.DIRECTORY

    def is_file(self) -> bool:
        """Return True if this node is a regular file."""
        return self.file_type is FileType.FILE

    @property
    def size(self) -> int:
        """Return the size reported by stat."""
        return 0

    def touch(self, now: float) -> None:
        """Record a modification: set ``mtime`` and ``ctime``, leave ``atime``."""
        self.mtime = now
        self.ctime = now

    def to_stat(self) -> StatResult:
        """Create a read-only snapshot of this node's metadata."""
        return StatResult(
            file_type=self.file_type,
            size=self.size,
            mtime=float(self.mtime),  # type: ignore[arg-type]
            ctime=float(self.ctime),  # type: ignore[arg-type]
            atime=float(self.atime),  # type: ignore[arg-type]
        )

    def __str__(self) -> str:
        """Return the node kind, used in error messages."""
        return self.file_type.value


@dataclass(eq=False)
class Directory(Node):
    """A directory node owning its children by name."""

    children: dict[str, Node] = field(default_factory=dict)  # pyright: ignore[reportUnknownVariableType]

    file_type = FileType.DIRECTORY


@dataclass(eq=False)
class File(Node):
    """A regular file node.

    ``content`` is always bytes.  ``encoding`` is the default codec for
    ``read()``; when it is None and no codec is requested, reads return
    the raw bytes.
    """

    content: bytes = b""
    encoding: str | None = None

    file_type = FileType.FILE

    @property
    def size(self) -> int:
        """Return the size of the file content in bytes."""
        return len(self.content)

    def read(self, encoding: str | None = None) -> bytes | str:
        """Return the content, decoded if an encoding is requested or known."""
        codec = encoding or self.encoding
        if codec is None:
            return self.content
        return self.content.decode(codec)


@dataclass(frozen=True)
class StatResult:
    """Read-only snapshot of a node's metadata (returned by stat).

    The ``st_*`` properties mirror :class:`os.stat_result` so code that
    reads ``st_mtime`` or calls ``stat.S_ISDIR(st.st_mode)`` works
    unchanged.  ``st_mode`` carries file-type bits only.
    """

    file_type: FileType
    size: int
    mtime: float
    ctime: float
    atime: float

    def is_directory(self) -> bool:
        """Return True if the snapshot describes a directory."""
        return self.file_type is FileType.DIRECTORY

    def is_file(self) -> bool:
        """Return True if the snapshot describes a regular file."""
        return self.file_type is FileType.FILE

    @property
    def st_mode(self) -> int:
        """Return the file-type bits (``S_IFDIR`` or ``S_IFREG``)."""
        return _MODE_BITS[self.file_type]

    @property
    def st_size(self) -> int:
        """Return the size in bytes."""
        return self.size

    @property
    def st_mtime(self) -> float:
        """Return the modification time."""
        return self.mtime

    @property
    def st_ctime(self) -> float:
        """Return the change time."""
        return self.ctime

    @property
    def st_atime(self) -> float:
        """Return the access time."""
        return self.atime
