"""Errors decorated with a captured stack trace.

An error is in one of three states:

- absent: ``None``, nothing to trace
- bare: any ordinary exception, no trace attached
- traced: a `TracedError` holding the original exception and its frames

`wrap` moves a bare error to traced exactly once. Wrapping ``None`` stays
``None`` and wrapping an already traced error returns it untouched, so a
value can be passed through `wrap` at every layer of a call chain without
recapturing the stack.

Example:
    >>> import tracerr
    >>> def load(path):
    ...     try:
    ...         return open(path).read()
    ...     except OSError as exc:
    ...         raise tracerr.wrap(exc)
    >>> try:
    ...     load("/nonexistent")
    ... except tracerr.TracedError as e:
    ...     frames = e.stack_trace()

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tracerr.frames import Frame, FrameCapturer, capture


class TracedError(Exception):
    """An exception carrying the stack trace of its creation or first wrap.

    The message is always the original exception's message. The original
    exception is also stored as ``__cause__`` so Python's own traceback
    output shows the chain.

    Attributes:
        err: The original exception, returned as-is by `unwrap`.
        frames: Captured frames, innermost first. Fixed at construction.
    """

    def __init__(self, err: BaseException, frames: Iterable[Frame] | None = None):
        self.err = err
        self.frames: tuple[Frame, ...] = tuple(frames) if frames is not None else ()
        super().__init__(str(err))
        self.__cause__ = err

    def __str__(self) -> str:
        return str(self.err)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.err!r}, frames=<{len(self.frames)} frames>)"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.err, self.frames))

    @property
    def message(self) -> str:
        """Message of the original exception."""
        return str(self.err)

    def stack_trace(self) -> tuple[Frame, ...]:
        """Return the captured frames, innermost first."""
        return self.frames

    def unwrap(self) -> BaseException:
        """Return the original exception."""
        return self.err


def custom_error(err: BaseException, frames: Iterable[Frame] | None) -> TracedError:
    """Create a traced error from explicit frames, without capturing.

    Used to rebuild a trace that was recorded elsewhere (another process,
    a log file). ``frames=None`` gives an empty trace.
    """
    return TracedError(err, frames)


def new(
    message: str,
    *args: Any,
    capturer: FrameCapturer | None = None,
    **kwargs: Any,
) -> TracedError:
    """Create a new traced error.

    When arguments are given the message is formatted with `str.format`.
    ``capturer`` is reserved and never used as a format field; pass e.g.
    ``StackCapturer(TracerrConfig(max_frames=10))`` to bound the trace.

    Example:
        >>> err = new("user {} not found", 42)
        >>> str(err)
        'user 42 not found'
    """
    if args or kwargs:
        message = message.format(*args, **kwargs)
    return TracedError(Exception(message), capture(1, capturer=capturer))


def errorf(
    message: str, *args: Any, capturer: FrameCapturer | None = None
) -> TracedError:
    """Create a new traced error with a printf-style message.

    Example:
        >>> str(errorf("invalid argument %d: %r", 5, "foo"))
        "invalid argument 5: 'foo'"
    """
    if args:
        message = message % args
    return TracedError(Exception(message), capture(1, capturer=capturer))


def wrap(
    err: BaseException | None, *, capturer: FrameCapturer | None = None
) -> TracedError | None:
    """Attach a stack trace to ``err`` unless it already has one.

    Returns:
        None for None, ``err`` itself if already traced, otherwise a new
        `TracedError` whose trace starts at the caller of `wrap`.
    """
    if err is None:
        return None
    if isinstance(err, TracedError):
        return err
    return TracedError(err, capture(1, capturer=capturer))


def unwrap(err: BaseException | None) -> BaseException | None:
    """Return the original exception behind a traced error.

    Bare exceptions and None are returned unchanged.
    """
    if isinstance(err, TracedError):
        return err.unwrap()
    return err


def stack_trace(err: BaseException | None) -> tuple[Frame, ...]:
    """Return the frames of a traced error, or an empty tuple for anything else."""
    if isinstance(err, TracedError):
        return err.stack_trace()
    return ()
