"""Engine configuration.

Every fake filesystem is configured once, at construction, through an
``FsConfig`` record.  There are no environment variables or config
files; a test that needs a different setting builds its own config.

- ``cwd`` — directory that relative paths are resolved against.  ``None``
  means the real process working directory, looked up at resolution
  time, so relative paths land where the code under test expects them.
- ``default_encoding`` — codec used to turn text into bytes when the
  caller gives no encoding.
- ``clock`` — source of timestamps (epoch seconds).  Tests inject a
  fake clock to make ``mtime``/``ctime`` assertions deterministic.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from time import time

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class FsConfig:
    """Immutable settings for one ``FakeFs`` instance."""

    cwd: str | None = None
    default_encoding: str = DEFAULT_ENCODING
    clock: Callable[[], float] = field(default=time)
