"""tracerr: exceptions with stack traces and source fragments.

Attach the call stack to an exception where it is created or first
wrapped, then print it with the surrounding source lines.

Quickstart:
    >>> import tracerr
    >>> def read():
    ...     try:
    ...         return open("/tmp/non_existent_file").read()
    ...     except OSError as exc:
    ...         return tracerr.wrap(exc)
    >>> err = read()
    >>> tracerr.print_source_color(err)

Creating errors:
    >>> err = tracerr.new("i = {}", 2)
    >>> err = tracerr.errorf("i = %d", 2)

Wrapping is idempotent, so it is safe at every layer:
    >>> tracerr.wrap(tracerr.wrap(err)) is err
    True
    >>> tracerr.wrap(None) is None
    True

Output:
    ```
    i = 2

    /src/app/main.py:19 app.main.bar()
    16
    17	def bar(i):
    18	    if i >= 2:
    19	        return tracerr.errorf("i = %d", i)
    20	    return bar(i + 1)
    21

    ...
    ```

Thread-Safety:
Capture only reads the calling thread's stack. Renderers keep no per-call
state. The source line cache publishes new entries copy-on-write, so any
number of threads can render concurrently.

Free-Threading (PEP 703):
Declares GIL-independence via `_Py_mod_gil = 0` attribute.

"""

from tracerr.cache import SourceLineCache
from tracerr.config import DEFAULT_CONFIG, TracerrConfig
from tracerr.error import (
    TracedError,
    custom_error,
    errorf,
    new,
    stack_trace,
    unwrap,
    wrap,
)
from tracerr.exceptions import (
    ErrorCode,
    SourceError,
    SourceNotFoundError,
    TooFewLinesError,
    TracerrError,
)
from tracerr.frames import Frame, FrameCapturer, StackCapturer, capture
from tracerr.printing import (
    default_renderer,
    print_error,
    print_source,
    print_source_color,
    sprint,
    sprint_source,
    sprint_source_color,
)
from tracerr.render import Renderer, Window
from tracerr.terminal import Colorizer, Role, ansi_colorize, plain, strip_colors

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Colorizer",
    "ErrorCode",
    "Frame",
    "FrameCapturer",
    "Renderer",
    "Role",
    "SourceError",
    "SourceLineCache",
    "SourceNotFoundError",
    "StackCapturer",
    "TooFewLinesError",
    "TracedError",
    "TracerrConfig",
    "TracerrError",
    "Window",
    "__version__",
    "ansi_colorize",
    "capture",
    "custom_error",
    "default_renderer",
    "errorf",
    "new",
    "plain",
    "print_error",
    "print_source",
    "print_source_color",
    "sprint",
    "sprint_source",
    "sprint_source_color",
    "stack_trace",
    "strip_colors",
    "unwrap",
    "wrap",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'tracerr' has no attribute {name!r}")
