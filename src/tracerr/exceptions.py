"""Exceptions raised by tracerr itself.

These describe problems tracerr hits while doing its own work, never the
user errors it decorates (those are `TracedError`, see `tracerr.error`).

Exception Hierarchy:
TracerrError (base)
└── SourceError               # Source context could not be produced
    ├── SourceNotFoundError   # Source file unreadable
    └── TooFewLinesError      # Traced line lies past end of file

The renderer never lets a `SourceError` escape: it turns the exception text
into an inline diagnostic row and moves on to the next frame.

Example:
    ```
    boom

    /app/worker.py:42 app.worker.run()
    tracerr: file /app/worker.py not found

    ```

"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Searchable codes for tracerr diagnostics.

    Format: T-{CATEGORY}-{NUMBER}
    Categories: CAP (stack capture), SRC (source lookup)
    """

    # Capture diagnostics (T-CAP-xxx)
    CAPTURE_INCOMPLETE = "T-CAP-001"

    # Source diagnostics (T-SRC-xxx)
    FILE_NOT_FOUND = "T-SRC-001"
    TOO_FEW_LINES = "T-SRC-002"

    @property
    def category(self) -> str:
        """Diagnostic category (e.g., 'capture', 'source')."""
        prefix = self.value.split("-")[1]
        return {
            "CAP": "capture",
            "SRC": "source",
        }.get(prefix, "unknown")


class TracerrError(Exception):
    """Base exception for all tracerr failures.

    Attributes:
        code: Optional ErrorCode identifying the failure.
    """

    code: ErrorCode | None = None


class SourceError(TracerrError):
    """Source lines for a frame could not be shown."""


class SourceNotFoundError(SourceError):
    """Source file could not be read.

    The message only names the path; the underlying OS error is logged at
    DEBUG and not chained.
    """

    code: ErrorCode | None = ErrorCode.FILE_NOT_FOUND

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"file {path} not found")


class TooFewLinesError(SourceError):
    """Traced line number is beyond the end of the source file."""

    code: ErrorCode | None = ErrorCode.TOO_FEW_LINES

    def __init__(self, got: int, want: int):
        self.got = got
        self.want = want
        super().__init__(f"too few lines, got {got}, want {want}")
