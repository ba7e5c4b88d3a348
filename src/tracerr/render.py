"""Render traced errors as text, optionally with source context.

Output Format:
    ```
    runtime error: index out of range

    /src/app/helpers.py:17 app.helpers.add_frame_c()
    15
    16	def add_frame_c(message):
    17	    return tracerr.new(message)
    18

    /src/app/main.py:9 app.main.run()
    ...
    ```

Each frame gets a header row in canonical `Frame` form. When a window is
requested, the lines around the traced line follow as ``"<n>\\t<text>"``
rows and a blank row closes the frame. A frame whose source cannot be
shown gets a single diagnostic row instead; rendering never fails because
of a missing or short source file.

"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from tracerr.cache import SourceLineCache
from tracerr.config import DEFAULT_CONFIG, TracerrConfig
from tracerr.error import TracedError
from tracerr.exceptions import SourceError, TooFewLinesError
from tracerr.frames import Frame
from tracerr.terminal import Colorizer, Role, ansi_colorize, plain


@dataclass(frozen=True, slots=True)
class Window:
    """Number of source lines to show around a traced line.

    Attributes:
        before: Lines shown above the traced line.
        after: Lines shown below the traced line.
        with_source: False to render frame headers only.
    """

    before: int = 0
    after: int = 0
    with_source: bool = False

    @classmethod
    def none(cls) -> Window:
        """Frame headers only."""
        return cls()

    @classmethod
    def default(cls, config: TracerrConfig | None = None) -> Window:
        config = config or DEFAULT_CONFIG
        return cls(config.lines_before, config.lines_after, True)

    @classmethod
    def total(cls, n: int) -> Window:
        """Show ``n`` lines in total, traced line included.

        The extra line of an even split goes before the traced line.
        ``n <= 0`` shows no source at all.

        Example:
            >>> Window.total(4)
            Window(before=2, after=1, with_source=True)
        """
        if n <= 0:
            return cls.none()
        after = (n - 1) // 2
        return cls(n - after - 1, after, True)

    @classmethod
    def explicit(cls, before: int, after: int) -> Window:
        """Show exactly ``before`` and ``after`` lines; negatives count as 0."""
        return cls(max(before, 0), max(after, 0), True)

    @classmethod
    def from_args(cls, *nums: int, config: TracerrConfig | None = None) -> Window:
        """Build a window from zero, one (total) or two (before, after) numbers."""
        if not nums:
            return cls.default(config)
        if len(nums) == 1:
            return cls.total(nums[0])
        if len(nums) == 2:
            return cls.explicit(nums[0], nums[1])
        raise TypeError(f"expected at most 2 window sizes, got {len(nums)}")


def _same_codec(a: str, b: str) -> bool:
    try:
        return codecs.lookup(a).name == codecs.lookup(b).name
    except LookupError:
        return a == b


class Renderer:
    """Format traced errors, reading source through a shared cache.

    A renderer is stateless apart from its cache, so one instance can serve
    any number of threads. Pass the same `SourceLineCache` to several
    renderers to share loaded files. Without a cache, the renderer builds
    its own using ``config.encoding``.

    Example:
        >>> import tracerr
        >>> err = tracerr.new("boom")
        >>> renderer = Renderer(SourceLineCache())
        >>> text = renderer.render(err, Window.total(5), color=True)

    """

    __slots__ = ("_cache", "_colorizer", "_config")

    def __init__(
        self,
        cache: SourceLineCache | None = None,
        *,
        colorizer: Colorizer = ansi_colorize,
        config: TracerrConfig | None = None,
    ):
        if cache is None:
            cache = SourceLineCache((config or DEFAULT_CONFIG).encoding)
        elif config is not None and not _same_codec(cache.encoding, config.encoding):
            raise ValueError(
                f"cache encoding {cache.encoding!r} does not match "
                f"config encoding {config.encoding!r}"
            )
        self._cache = cache
        self._colorizer = colorizer
        self._config = config or DEFAULT_CONFIG

    @property
    def cache(self) -> SourceLineCache:
        return self._cache

    @property
    def config(self) -> TracerrConfig:
        return self._config

    def render(
        self,
        err: BaseException | None,
        window: Window | None = None,
        color: bool = False,
    ) -> str:
        """Render an error with its stack trace.

        Args:
            err: Error to render. None renders as an empty string, an
                untraced exception as its message alone.
            window: Source lines to show per frame. Defaults to
                `Window.default` for this renderer's config.
            color: Style output through the renderer's colorizer.

        Returns:
            Rows joined with newlines.
        """
        if err is None:
            return ""
        if not isinstance(err, TracedError):
            return str(err)
        if window is None:
            window = Window.default(self._config)
        colorize = self._colorizer if color else plain

        rows = [err.message]
        if window.with_source:
            rows.append("")
        for frame in err.stack_trace():
            rows.append(colorize(Role.EMPHASIS, str(frame)))
            if window.with_source:
                rows.extend(self._source_rows(frame, window, colorize))
                rows.append("")
        return "\n".join(rows)

    def _source_rows(self, frame: Frame, window: Window, colorize: Colorizer) -> list[str]:
        try:
            lines = self._window_lines(frame, window)
        except SourceError as exc:
            return [colorize(Role.WARNING, f"{self._config.diagnostic_prefix}{exc}")]

        rows = []
        for lineno, text in lines:
            if lineno == frame.line:
                rows.append(colorize(Role.DANGER, f"{lineno}\t{text}"))
            else:
                rows.append(f"{colorize(Role.MUTED, str(lineno))}\t{text}")
        return rows

    def _window_lines(self, frame: Frame, window: Window) -> list[tuple[int, str]]:
        """Return ``(lineno, text)`` pairs around the traced line, clipped to the file."""
        lines = self._cache.lines_for(frame.path)
        if len(lines) < frame.line:
            raise TooFewLinesError(len(lines), frame.line)
        start = max(frame.line - window.before, 1)
        end = min(frame.line + window.after, len(lines))
        return [(lineno, lines[lineno - 1]) for lineno in range(start, end + 1)]
