"""Stack frames and stack capture.

A `Frame` is one recorded call site. `StackCapturer` walks the live
interpreter stack and turns each level into a `Frame`, innermost first.

Capture is eager: it runs when an error is created or first wrapped, while
the interesting frames still exist.

Thread-Safety:
`StackCapturer` holds no mutable state; `sys._getframe` only sees the
calling thread's stack.

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from types import FrameType
from typing import Protocol

from tracerr.config import DEFAULT_CONFIG, TracerrConfig
from tracerr.exceptions import ErrorCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Frame:
    """A single step in a stack trace.

    Attributes:
        function: Qualified function name, e.g. ``"app.worker.Job.run"``.
        path: Source file path as reported by the code object.
        line: 1-based line number of the call site; values below 1 raise
            ValueError.

    Example:
        >>> str(Frame("app.main", "/src/app.py", 12))
        '/src/app.py:12 app.main()'
    """

    function: str
    path: str
    line: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")

    def __str__(self) -> str:
        return f"{self.path}:{self.line} {self.function}()"

    @classmethod
    def parse(cls, text: str) -> Frame:
        """Parse the canonical ``"<path>:<line> <function>()"`` form.

        Raises:
            ValueError: If text is not a canonical frame row.
        """
        if not text.endswith("()"):
            raise ValueError(f"not a frame: {text!r}")
        location, sep, function = text[:-2].rpartition(" ")
        path, colon, line = location.rpartition(":")
        if not sep or not colon or not function or not path or not line.isdecimal():
            raise ValueError(f"not a frame: {text!r}")
        if int(line) < 1:
            raise ValueError(f"not a frame: {text!r}")
        return cls(function=function, path=path, line=int(line))


def function_name(frame: FrameType) -> str:
    """Return ``"<module>.<qualname>"`` for a live frame."""
    module = frame.f_globals.get("__name__") or "?"
    return f"{module}.{frame.f_code.co_qualname}"


class FrameCapturer(Protocol):
    """Anything that can produce an innermost-first list of frames."""

    def capture(self, skip: int = 0) -> list[Frame]: ...


class StackCapturer:
    """Capture frames from the calling thread's stack.

    ``skip=0`` starts at the caller of `capture`; each increment drops one
    more level. The walk ends at the outermost frame, or earlier when a
    level cannot be resolved, in which case the frames gathered so far are
    returned.

    Example:
        >>> frames = StackCapturer().capture()
        >>> frames[0].function.endswith("<module>")
        True
    """

    __slots__ = ("_limit",)

    def __init__(self, config: TracerrConfig | None = None):
        self._limit = (config or DEFAULT_CONFIG).max_frames

    def capture(self, skip: int = 0) -> list[Frame]:
        if skip < 0:
            raise ValueError(f"skip must be >= 0, got {skip}")
        try:
            current: FrameType | None = sys._getframe(skip + 1)
        except ValueError:
            # Stack is shallower than requested.
            return []
        return self.walk(current)

    def walk(self, frame: FrameType | None) -> list[Frame]:
        """Convert ``frame`` and all of its callers into frames.

        Useful for a stack that is no longer live, e.g.
        ``walk(exc.__traceback__.tb_frame)``.
        """
        current = frame
        frames: list[Frame] = []
        while current is not None:
            if self._limit is not None and len(frames) >= self._limit:
                break
            line = current.f_lineno
            path = current.f_code.co_filename
            if not line or not path:
                logger.debug(
                    "%s: stack capture stopped after %d frames",
                    ErrorCode.CAPTURE_INCOMPLETE.value,
                    len(frames),
                )
                break
            frames.append(Frame(function=function_name(current), path=path, line=line))
            current = current.f_back
        return frames


_default_capturer = StackCapturer()


def capture(skip: int = 0, *, capturer: FrameCapturer | None = None) -> list[Frame]:
    """Capture the stack starting ``skip`` levels above the caller.

    Args:
        skip: Number of additional caller levels to drop.
        capturer: Alternate capturer; defaults to a shared `StackCapturer`.

    Returns:
        Frames ordered innermost first.
    """
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")
    if capturer is None:
        return _default_capturer.capture(skip + 1)
    return capturer.capture(skip + 1)
