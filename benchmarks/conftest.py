from __future__ import annotations

import gc
import json
import os
import platform
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from benchmarks.fixtures.call_chain import add_frames
from tracerr import Renderer, SourceLineCache, TracedError

try:
    import importlib.metadata as importlib_metadata
except ModuleNotFoundError:  # pragma: no cover
    import importlib_metadata  # type: ignore


BASE_DIR = Path(__file__).resolve().parent
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"
BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)


def _version(dist: str) -> str:
    try:
        return importlib_metadata.version(dist)
    except importlib_metadata.PackageNotFoundError:
        return "unknown"


def collect_environment_metadata() -> dict[str, object]:
    """Capture reproducibility metadata for each benchmark run."""
    return {
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "executable": sys.executable,
            "gil_enabled": getattr(sys, "_is_gil_enabled", lambda: True)(),
        },
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "cpu": {
            "processor": platform.processor(),
            "count": os.cpu_count(),
        },
        "tracerr": _version("tracerr"),
    }


@pytest.fixture(scope="session")
def environment_metadata() -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    metadata = collect_environment_metadata()
    (BENCHMARK_OUTPUT_DIR / "environment.json").write_text(json.dumps(metadata, indent=2))
    return metadata


@pytest.fixture
def gc_disabled() -> Iterator[None]:
    """Keep the collector out of timed sections."""
    gc.disable()
    try:
        yield
    finally:
        gc.enable()


@pytest.fixture(scope="session")
def deep_error() -> TracedError:
    return add_frames(20, "runtime error: index out of range")


@pytest.fixture(scope="session")
def warm_renderer(deep_error: TracedError) -> Renderer:
    """Renderer whose cache already holds every file on the deep trace."""
    renderer = Renderer(SourceLineCache())
    renderer.render(deep_error)
    return renderer
