"""Tests for the filesystem audit log.

The logger records structured entries for filesystem events: which
paths were created, changed, or removed, and which operations failed.
"""

import contextlib

from fake_fs.config import FsConfig
from fake_fs.fs import FakeFs
from fake_fs.logging import LogEntry, Logger, LogLevel


def _fs(logger: Logger | None = None) -> FakeFs:
    """Create a filesystem rooted at cwd "/"."""
    return FakeFs(FsConfig(cwd="/"), logger=logger)


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message, source, and path."""
        entry = LogEntry(
            level=LogLevel.INFO,
            message="mkdir",
            source="fs",
            path="/tmp",
        )
        assert entry.level is LogLevel.INFO
        assert entry.message == "mkdir"
        assert entry.source == "fs"
        assert entry.path == "/tmp"

    def test_path_defaults_to_none(self) -> None:
        """Entries not about a path have no path."""
        assert LogEntry(level=LogLevel.INFO, message="m", source="s").path is None

    def test_entry_str(self) -> None:
        """String representation should include level, source, and message."""
        entry = LogEntry(level=LogLevel.WARNING, message="unlink failed", source="fs")
        assert str(entry) == "[WARNING] fs: unlink failed"


class TestLogger:
    """Verify the log buffer itself."""

    def test_starts_empty(self) -> None:
        """A new logger has no entries."""
        assert Logger().entries == []

    def test_log_appends_in_order(self) -> None:
        """Entries are kept in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="fs")
        logger.log(LogLevel.ERROR, "second", source="fs")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_entries_returns_copy(self) -> None:
        """Mutating the returned list does not affect the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="fs")
        logger.entries.clear()
        assert len(logger) == 1

    def test_min_level_drops_noise(self) -> None:
        """Entries below the logger's threshold are not kept."""
        logger = Logger(min_level=LogLevel.INFO)
        logger.log(LogLevel.DEBUG, "ignored", source="builder")
        logger.log(LogLevel.INFO, "kept", source="fs")
        assert [e.message for e in logger.entries] == ["kept"]

    def test_filter_by_level_source_and_path(self) -> None:
        """filter() narrows by any combination of criteria."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "a", source="builder", path="/x")
        logger.log(LogLevel.INFO, "b", source="fs", path="/x")
        logger.log(LogLevel.WARNING, "c", source="fs", path="/y")
        assert [e.message for e in logger.filter(min_level=LogLevel.INFO)] == ["b", "c"]
        assert [e.message for e in logger.filter(source="fs", path="/x")] == ["b"]

    def test_clear(self) -> None:
        """clear() removes everything."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="fs")
        logger.clear()
        assert len(logger) == 0


class TestFilesystemLogging:
    """Verify the filesystem records its events."""

    def test_mutations_logged_at_info(self) -> None:
        """Each successful mutation leaves an INFO entry for its path."""
        fs = _fs()
        fs.mkdir("/d")
        fs.write_file("/d/f", "x")
        fs.append_file("/d/f", "y")
        fs.write_file("/d/f", "z")
        fs.rename("/d/f", "/d/g")
        fs.unlink("/d/g")
        fs.rmdir("/d")
        messages = [e.message for e in fs.logger.filter(source="fs", min_level=LogLevel.INFO)]
        assert messages == [
            "mkdir",
            "create file",
            "append file",
            "write file",
            "rename from /d/f",
            "unlink",
            "rmdir",
        ]

    def test_reads_are_not_logged(self) -> None:
        """Queries leave no trace."""
        fs = _fs()
        fs.declare_file("/f", "x")
        fs.logger.clear()
        fs.stat("/f")
        fs.read_file("/f")
        fs.readdir("/")
        fs.exists("/f")
        assert fs.logger.entries == []

    def test_declarations_logged_at_debug(self) -> None:
        """Declarations are DEBUG entries from the builder."""
        fs = _fs()
        fs.declare_dir("/a").declare_file("/a/f", "")
        entries = fs.logger.filter(source="builder")
        assert [(e.level, e.path) for e in entries] == [
            (LogLevel.DEBUG, "/a"),
            (LogLevel.DEBUG, "/a/f"),
        ]

    def test_shared_logger(self) -> None:
        """Two filesystems can share one audit log."""
        logger = Logger(min_level=LogLevel.INFO)
        _fs(logger).mkdir("/one")
        _fs(logger).mkdir("/two")
        assert [e.path for e in logger.entries] == ["/one", "/two"]

    def test_direct_errors_are_not_logged(self) -> None:
        """Direct forms raise; only callback forms record failures."""
        fs = _fs()
        with contextlib.suppress(FileNotFoundError):
            fs.unlink("/ghost")
        assert fs.logger.filter(min_level=LogLevel.WARNING) == []
