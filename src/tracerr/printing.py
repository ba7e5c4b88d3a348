"""Print and Sprint helpers.

Convenience functions over a process-wide default `Renderer`. The
``sprint*`` variants return the text, the ``print*`` variants write it to
``file`` (standard output by default) followed by a newline.

Window sizes are passed positionally:

- no number: default window (3 lines before, 2 after)
- one number: total lines shown, traced line included
- two numbers: exact lines before and after

Example:
    >>> import tracerr
    >>> err = tracerr.new("boom")
    >>> tracerr.print_source_color(err, 5)

"""

from __future__ import annotations

from typing import TextIO

from tracerr.config import DEFAULT_CONFIG
from tracerr.render import Renderer, Window

_default_renderer = Renderer(config=DEFAULT_CONFIG)


def default_renderer() -> Renderer:
    """Return the renderer shared by the module-level helpers."""
    return _default_renderer


def sprint(err: BaseException | None, *, renderer: Renderer | None = None) -> str:
    """Return the error message and stack trace, without source lines."""
    renderer = renderer or _default_renderer
    return renderer.render(err, Window.none())


def sprint_source(
    err: BaseException | None, *nums: int, renderer: Renderer | None = None
) -> str:
    """Return the error message, stack trace and source fragments."""
    renderer = renderer or _default_renderer
    return renderer.render(err, Window.from_args(*nums, config=renderer.config))


def sprint_source_color(
    err: BaseException | None, *nums: int, renderer: Renderer | None = None
) -> str:
    """Same as `sprint_source`, colored."""
    renderer = renderer or _default_renderer
    return renderer.render(err, Window.from_args(*nums, config=renderer.config), color=True)


def print_error(
    err: BaseException | None,
    *,
    file: TextIO | None = None,
    renderer: Renderer | None = None,
) -> None:
    """Print the error message and stack trace."""
    print(sprint(err, renderer=renderer), file=file)


def print_source(
    err: BaseException | None,
    *nums: int,
    file: TextIO | None = None,
    renderer: Renderer | None = None,
) -> None:
    """Print the error message, stack trace and source fragments."""
    print(sprint_source(err, *nums, renderer=renderer), file=file)


def print_source_color(
    err: BaseException | None,
    *nums: int,
    file: TextIO | None = None,
    renderer: Renderer | None = None,
) -> None:
    """Print the error message, stack trace and colored source fragments."""
    print(sprint_source_color(err, *nums, renderer=renderer), file=file)
