"""Filesystem audit log.

The logger records structured entries for filesystem events — an audit
trail of which paths were created, changed, or removed, and which
operations failed.  Tests can inspect it to assert on side effects
without re-walking the tree.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source, path).
- **Logger** — an append-only log with filtering and clearing.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Filter returns a list, not a generator** — the log is typically
      small and callers usually want to iterate multiple times.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries.

    Using IntEnum means levels compare with ``<`` / ``>`` naturally,
    which makes minimum-level filtering trivial.
    """

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "fs").
        path: The path the event concerns, if any.

    """

    level: LogLevel
    message: str
    source: str
    path: str | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering.

    Entries below ``min_level`` are dropped on arrival, so a logger
    created with ``LogLevel.INFO`` ignores declaration noise.
    """

    def __init__(self, min_level: LogLevel = LogLevel.DEBUG) -> None:
        """Create an empty logger that keeps entries at or above *min_level*."""
        self._entries: list[LogEntry] = []
        self._min_level = min_level

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        path: str | None = None,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.
            path: Path the event concerns.

        """
        if level < self._min_level:
            return
        self._entries.append(LogEntry(level=level, message=message, source=source, path=path))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        path: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.
            path: If set, only return entries about this path.

        Returns:
            A filtered list of log entries.

        """
        result = self._entries
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        if path is not None:
            result = [e for e in result if e.path == path]
        return result if result is not self._entries else list(result)

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
