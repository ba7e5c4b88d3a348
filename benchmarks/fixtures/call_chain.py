"""Recursive call chain used to build stacks of a known depth."""

from __future__ import annotations

import tracerr
from tracerr import TracedError


def add_frames(depth: int, message: str) -> TracedError:
    if depth <= 1:
        return tracerr.new(message)
    return add_frames(depth - 1, message)
