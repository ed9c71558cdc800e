"""Encoding options and content conversion.

``read_file``, ``write_file`` and ``append_file`` accept their encoding
either as a bare codec name (``"utf-8"``) or as an options record
(``EncodingOptions(encoding="utf-8")`` or ``{"encoding": "utf-8"}``).
Both shapes are resolved to a single ``str | None`` here, before the
operation layer runs, so the operations themselves never inspect the
argument's type.
"""

import codecs
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

Content = bytes | bytearray | memoryview | str | None


@dataclass(frozen=True)
class EncodingOptions:
    """Options record recognized by the read/write operations."""

    encoding: str | None = None


Options = str | EncodingOptions | Mapping[str, Any] | None


def resolve_encoding(options: Options) -> str | None:
    """Reduce *options* to a canonical codec name, or None.

    Mapping options may carry other keys (``flag``, ``mode``) as real
    ``fs`` option bags do; only ``encoding`` is read.

    Raises:
        TypeError: If *options* is none of the accepted shapes.
        LookupError: If the encoding name is unknown.

    """
    if options is None:
        return None
    if isinstance(options, str):
        encoding: Any = options
    elif isinstance(options, EncodingOptions):
        encoding = options.encoding
    elif isinstance(options, Mapping):
        encoding = options.get("encoding")
    else:
        msg = f"Options must be an encoding name or options record, not {type(options).__name__}"
        raise TypeError(msg)

    if encoding is None:
        return None
    if not isinstance(encoding, str):
        msg = f"Encoding must be a string, not {type(encoding).__name__}"
        raise TypeError(msg)
    return codecs.lookup(encoding).name


def to_bytes(data: Content, encoding: str | None, default_encoding: str) -> bytes:
    """Convert *data* to the bytes stored in a file.

    Text is encoded with *encoding*, or *default_encoding* when none is
    given.  ``None`` becomes empty content.

    Raises:
        TypeError: If *data* is neither text nor bytes-like.

    """
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode(encoding or default_encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    msg = f"File content must be str or bytes, not {type(data).__name__}"
    raise TypeError(msg)
