"""Configuration for trace capture and source rendering.

All tunables live on a single frozen dataclass so a renderer (or a test)
can carry its own settings without touching module state.

Example:
    >>> from tracerr import Renderer, StackCapturer, TracerrConfig
    >>> config = TracerrConfig(lines_before=5, lines_after=5, encoding="latin-1")
    >>> renderer = Renderer(config=config)
    >>> capturer = StackCapturer(TracerrConfig(max_frames=10))

"""

from __future__ import annotations

import codecs
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TracerrConfig:
    """Settings for capture, source loading, and rendering.

    Each field is read by the component built from the config:
    `StackCapturer` takes ``max_frames``, a `Renderer` takes the window
    defaults and ``diagnostic_prefix``, and a `Renderer` created without an
    explicit cache builds its `SourceLineCache` with ``encoding``.

    Attributes:
        lines_before: Source lines shown before the traced line by default.
        lines_after: Source lines shown after the traced line by default.
        max_frames: Upper bound on captured frames (None for the whole stack).
        encoding: Encoding used to decode source files.
        diagnostic_prefix: Prefix for inline diagnostic rows in rendered output.
    """

    lines_before: int = 3
    lines_after: int = 2
    max_frames: int | None = None
    encoding: str = "utf-8"
    diagnostic_prefix: str = "tracerr: "

    def __post_init__(self) -> None:
        if self.lines_before < 0:
            raise ValueError(f"lines_before must be >= 0, got {self.lines_before}")
        if self.lines_after < 0:
            raise ValueError(f"lines_after must be >= 0, got {self.lines_after}")
        if self.max_frames is not None and self.max_frames < 1:
            raise ValueError(f"max_frames must be >= 1 or None, got {self.max_frames}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding!r}") from None


DEFAULT_CONFIG = TracerrConfig()
