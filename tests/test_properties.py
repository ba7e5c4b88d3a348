"""Property-based tests for tracerr.

Uses hypothesis to verify invariants that must hold for *all* inputs:

- Window sizes split totals with the extra line before the traced line
- Explicit window sizes never go negative
- Frame headers parse back to the frame they were rendered from
- Wrapping is idempotent and unwrapping preserves identity
- Rendering never raises for arbitrary frames
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

import tracerr
from tracerr import Frame, Renderer, SourceLineCache, Window

from .strategies import (
    frame_lists,
    frames,
    line_numbers,
    missing_frames,
    window_args,
    window_sizes,
)


class TestWindowProperties:
    """Window size arithmetic."""

    @given(n=window_sizes)
    def test_total_line_count(self, n: int) -> None:
        window = Window.total(n)
        if n <= 0:
            assert not window.with_source
        else:
            assert window.with_source
            assert window.before + window.after + 1 == n
            assert window.before - window.after in (0, 1)

    @given(before=window_sizes, after=window_sizes)
    def test_explicit_clamps(self, before: int, after: int) -> None:
        window = Window.explicit(before, after)
        assert window.with_source
        assert window.before == max(before, 0)
        assert window.after == max(after, 0)

    @given(nums=window_args)
    def test_from_args_dispatch(self, nums: tuple[int, ...]) -> None:
        window = Window.from_args(*nums)
        if not nums:
            assert window == Window.default()
        elif len(nums) == 1:
            assert window == Window.total(nums[0])
        else:
            assert window == Window.explicit(*nums)


class TestFrameProperties:
    """Canonical frame form."""

    @given(frame=frames)
    @settings(max_examples=300)
    def test_parse_roundtrip(self, frame: Frame) -> None:
        assert Frame.parse(str(frame)) == frame


class TestErrorProperties:
    """Wrap, unwrap and custom errors."""

    @given(message=st.text(max_size=50))
    def test_wrap_idempotent(self, message: str) -> None:
        original = ValueError(message)
        once = tracerr.wrap(original)
        assert tracerr.wrap(once) is once
        assert tracerr.unwrap(once) is original
        assert str(tracerr.unwrap(once)) == str(original)

    @given(frame_list=frame_lists)
    def test_custom_error_keeps_frames(self, frame_list: list[Frame]) -> None:
        err = tracerr.custom_error(RuntimeError("x"), frame_list)
        assert err.stack_trace() == tuple(frame_list)


class TestRenderProperties:
    """Rendering never fails and keeps one header per frame."""

    @given(
        frame_list=st.lists(missing_frames, max_size=10),
        nums=window_args,
        color=st.booleans(),
    )
    @settings(max_examples=100)
    def test_render_never_raises(self, frame_list, nums, color) -> None:
        renderer = Renderer(SourceLineCache())
        err = tracerr.custom_error(RuntimeError("boom"), frame_list)
        output = renderer.render(err, Window.from_args(*nums), color=color)
        assert output.split("\n")[0] == "boom"

    @given(line=line_numbers)
    def test_window_rows_never_exceed_request(self, line: int) -> None:
        renderer = Renderer(SourceLineCache())
        err = tracerr.custom_error(RuntimeError("boom"), [Frame("f", __file__, line)])
        rows = renderer.render(err, Window.explicit(2, 2)).split("\n")
        # message, blank, header, up to five source rows, blank
        assert 5 <= len(rows) <= 9
        assert rows[-1] == ""
