"""Path resolution — turn user-supplied path strings into tree segments.

``/home/alice/notes.txt`` becomes ``["home", "alice", "notes.txt"]``:
the ordered child names to follow from the root.  The root itself is
the empty list.

Resolution is purely textual and never looks at the tree:

1. The literal root ``/`` short-circuits to ``[]``.
2. Relative paths are joined onto the working directory.
3. ``.``, ``..`` and repeated separators are normalized away with POSIX
   rules (``..`` at the root stays at the root).
"""

import os
import posixpath

ROOT = "/"

PathArg = str | os.PathLike[str]


def _to_posix(path: str) -> str:
    """Treat the host separator as ``/`` (a no-op on POSIX hosts)."""
    if os.sep != "/":
        return path.replace(os.sep, "/")
    return path


def resolve(path: PathArg, cwd: str | None = None) -> str:
    """Return the absolute, normalized form of *path*.

    Args:
        path: The path to resolve (absolute or relative).
        cwd: Directory that relative paths start from.  ``None`` means
            the process working directory.

    """
    text = _to_posix(os.fspath(path))
    if text == ROOT:
        return ROOT
    if not text.startswith("/"):
        base = _to_posix(cwd if cwd is not None else os.getcwd())
        text = posixpath.join(base, text)
    # normpath preserves a leading "//".
    normalized = posixpath.normpath(text)
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def to_segments(path: PathArg, cwd: str | None = None) -> list[str]:
    """Split *path* into the child names leading to it from the root.

    Examples::

        "/"                 → []
        "/foo/bar/baz.txt"  → ["foo", "bar", "baz.txt"]
        "/foo/../bar/"      → ["bar"]
        "baz" (cwd="/foo")  → ["foo", "baz"]

    """
    if os.fspath(path) == ROOT:
        return []
    return [part for part in resolve(path, cwd).split("/") if part]


def to_path(segments: list[str]) -> str:
    """Join *segments* back into an absolute path string."""
    return "/" + "/".join(segments)
