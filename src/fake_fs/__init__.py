"""In-memory fake filesystem for tests.

Re-exports public symbols so callers can write::

    from fake_fs import FakeFs, FsConfig
"""

from fake_fs.builder import PathBuilder
from fake_fs.config import FsConfig
from fake_fs.errors import (
    AlreadyExistsError,
    BuildError,
    ErrorCode,
    FsError,
    IsADirError,
    NoEntryError,
    NotADirError,
    NotEmptyError,
    NotPermittedError,
    fs_error,
)
from fake_fs.fs import VERBS, Callback, FakeFs, deferred
from fake_fs.logging import LogEntry, Logger, LogLevel
from fake_fs.nodes import Directory, File, FileType, Node, StatResult
from fake_fs.options import EncodingOptions, resolve_encoding
from fake_fs.patching import Patcher, patched
from fake_fs.tree import Tree

__all__ = [
    "VERBS",
    "AlreadyExistsError",
    "BuildError",
    "Callback",
    "Directory",
    "EncodingOptions",
    "ErrorCode",
    "FakeFs",
    "File",
    "FileType",
    "FsConfig",
    "FsError",
    "IsADirError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "Node",
    "NoEntryError",
    "NotADirError",
    "NotEmptyError",
    "NotPermittedError",
    "PathBuilder",
    "Patcher",
    "StatResult",
    "Tree",
    "deferred",
    "fs_error",
    "patched",
    "resolve_encoding",
]
