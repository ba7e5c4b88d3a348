"""Terminal color utilities for rendered traces.

The renderer does not know about escape sequences. It asks a `Colorizer`
to style text by semantic `Role`; `ansi_colorize` is the stock ANSI
implementation and `plain` is the no-op used when color is off.
Simple, zero-dependency implementation.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum

# ANSI color codes
_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "black": "\033[30m",
    "red": "\033[31m",
    "yellow": "\033[33m",
}

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class Role(Enum):
    """Semantic role of a piece of rendered text."""

    EMPHASIS = "emphasis"  # frame header
    DANGER = "danger"  # traced source line
    WARNING = "warning"  # inline diagnostics
    MUTED = "muted"  # context line numbers


_ROLE_COLORS = {
    Role.EMPHASIS: "bold",
    Role.DANGER: "red",
    Role.WARNING: "yellow",
    Role.MUTED: "black",
}

Colorizer = Callable[[Role, str], str]


def ansi_colorize(role: Role, text: str) -> str:
    """Wrap text in the ANSI codes for ``role``.

    Example:
        >>> ansi_colorize(Role.DANGER, "17\\treturn x")
        '\\x1b[31m17\\treturn x\\x1b[0m'
    """
    prefix = _COLORS[_ROLE_COLORS[role]]
    return f"{prefix}{text}{_COLORS['reset']}"


def plain(role: Role, text: str) -> str:
    """Return text unchanged."""
    return text


def strip_colors(text: str) -> str:
    """Remove ANSI color codes from text.

    Args:
        text: Text potentially containing ANSI codes

    Returns:
        Text with all ANSI codes removed

    Example:
        >>> strip_colors("\\033[31mError\\033[0m")
        'Error'
    """
    return _ANSI_ESCAPE.sub("", text)
