"""Tests for TracerrConfig."""

import pytest

from tracerr import DEFAULT_CONFIG, TracerrConfig


class TestTracerrConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.lines_before == 3
        assert DEFAULT_CONFIG.lines_after == 2
        assert DEFAULT_CONFIG.max_frames is None
        assert DEFAULT_CONFIG.encoding == "utf-8"
        assert DEFAULT_CONFIG.diagnostic_prefix == "tracerr: "

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"lines_before": -1},
            {"lines_after": -1},
            {"max_frames": 0},
        ],
    )
    def test_rejects_invalid(self, kwargs):
        with pytest.raises(ValueError):
            TracerrConfig(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.lines_before = 10

    def test_rejects_unknown_encoding(self):
        with pytest.raises(ValueError, match="unknown encoding"):
            TracerrConfig(encoding="no-such-codec")

    def test_accepts_encoding_aliases(self):
        assert TracerrConfig(encoding="latin1").encoding == "latin1"
