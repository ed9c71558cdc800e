"""Tree engine — the primitive walk, insert and remove operations.

Everything above this layer speaks in paths; everything here speaks in
*segments* (the list produced by :func:`fake_fs.paths.to_segments`).
The tree owns a single root :class:`Directory` and offers four
primitives:

- ``locate`` — walk from the root; ``None`` if anything is missing.
- ``get`` — like ``locate`` but raises ``ENOENT``.
- ``insert`` — place a node, creating intermediate directories
  (``mkdir -p``) along the way.
- ``remove`` — detach a node from its parent.

The primitives deliberately skip the existence and type checks that
``mkdir``, ``write_file`` and friends perform; those belong to the
operation layer in :mod:`fake_fs.fs`.
"""

from __future__ import annotations

from collections.abc import Callable
from time import time

from fake_fs.errors import BuildError, ErrorCode, fs_error
from fake_fs.nodes import Directory, Node
from fake_fs.paths import to_path


class Tree:
    """A rooted tree of directories and files.

    Every non-root node is reachable by exactly one path.  Moving a node
    (``remove`` then ``insert``) transfers ownership; nothing is ever
    shared between two parents.
    """

    def __init__(
        self,
        root: Directory | None = None,
        *,
        clock: Callable[[], float] = time,
    ) -> None:
        """Create a tree around *root*, or around a fresh empty directory.

        Args:
            root: An existing root directory to adopt.
            clock: Timestamp source for directories the tree creates.

        """
        self._clock = clock
        self._root = root if root is not None else self._new_dir()

    def _new_dir(self) -> Directory:
        now = self._clock()
        return Directory(mtime=now, ctime=now, atime=now)

    @property
    def root(self) -> Directory:
        """Return the root directory."""
        return self._root

    def locate(self, segments: list[str]) -> Node | None:
        """Walk *segments* from the root and return the node found there.

        Returns None as soon as a segment is missing, or when an
        intermediate segment names a file (a file has no children to
        walk into).
        """
        node: Node = self._root
        for name in segments:
            if not isinstance(node, Directory):
                return None
            child = node.children.get(name)
            if child is None:
                return None
            node = child
        return node

    def get(self, segments: list[str]) -> Node:
        """Return the node at *segments*.

        Raises:
            FsError: ``ENOENT`` if nothing is there.

        """
        node = self.locate(segments)
        if node is None:
            raise fs_error(ErrorCode.ENOENT, to_path(segments))
        return node

    def insert(self, segments: list[str], node: Node) -> None:
        """Place *node* at *segments*, creating missing parent directories.

        Any existing entry at the final segment is replaced.

        Raises:
            BuildError: If *segments* is the root, or an intermediate
                segment already names a file.

        """
        if not segments:
            msg = "Cannot replace the root directory"
            raise BuildError(msg)

        parent = self._root
        for i, name in enumerate(segments[:-1]):
            child = parent.children.get(name)
            if child is None:
                child = self._new_dir()
                parent.children[name] = child
            if not isinstance(child, Directory):
                where = "/".join(segments[i:])
                msg = f"There is already {child} defined at {where}"
                raise BuildError(msg)
            parent = child

        parent.children[segments[-1]] = node

    def remove(self, segments: list[str]) -> Node | None:
        """Detach and return the node at *segments* (None if absent).

        Raises:
            FsError: ``EPERM`` for the root, ``ENOENT`` if the parent is
                missing, ``ENOTDIR`` if the parent is not a directory.

        """
        if not segments:
            raise fs_error(ErrorCode.EPERM, to_path(segments))
        parent = self.get(segments[:-1])
        if not isinstance(parent, Directory):
            raise fs_error(ErrorCode.ENOTDIR, to_path(segments[:-1]))
        return parent.children.pop(segments[-1], None)
