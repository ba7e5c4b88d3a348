"""Per-file source line cache.

Rendering source context touches the same handful of files over and over.
`SourceLineCache` reads each file once and keeps its lines for the life of
the cache object. Files are assumed not to change while a process runs, so
there is no invalidation and no eviction.

Thread-Safety:
Reads are lock-free lookups in an immutable snapshot dict. A miss reads the
file outside the lock, then takes the lock only to publish a copied dict
with the new entry (copy-on-write). Two threads missing the same path may
both read the file; the second write wins with identical content.

"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from tracerr.exceptions import SourceNotFoundError

logger = logging.getLogger(__name__)


class SourceLineCache:
    """Map file paths to their lines, loading lazily.

    Methods:
        lines_for(path): Return the lines of ``path``, reading it on first use
        clear(): Drop every cached entry

    Example:
        >>> cache = SourceLineCache()
        >>> lines = cache.lines_for(__file__)
        >>> __file__ in cache
        True

    Raises:
        SourceNotFoundError: From `lines_for` when the file cannot be read.
    """

    __slots__ = ("_encoding", "_lines", "_lock")

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding
        self._lines: dict[str, tuple[str, ...]] = {}
        self._lock = threading.Lock()

    @property
    def encoding(self) -> str:
        return self._encoding

    def lines_for(self, path: str) -> tuple[str, ...]:
        """Return the lines of a source file, without line terminators."""
        lines = self._lines.get(path)
        if lines is not None:
            return lines

        logger.debug("source cache miss: %s", path)
        try:
            text = Path(path).read_text(encoding=self._encoding, errors="replace")
        except (OSError, LookupError, ValueError) as exc:
            logger.debug("cannot read source %s: %s", path, exc)
            raise SourceNotFoundError(path) from None
        # Universal newlines are already normalized to "\n" by read_text.
        rows = text.split("\n")
        if rows[-1] == "":
            rows.pop()
        lines = tuple(rows)

        with self._lock:
            updated = self._lines.copy()
            updated[path] = lines
            self._lines = updated
        return lines

    def clear(self) -> None:
        with self._lock:
            self._lines = {}

    def __contains__(self, path: object) -> bool:
        return path in self._lines

    def __len__(self) -> int:
        return len(self._lines)
