"""Shared pytest configuration for tracerr examples.

``example_app`` executes the ``app.py`` next to the test as a fresh module.
The module is registered under ``example_<dir>`` while it runs, so captured
frames carry a stable function prefix such as ``example_new_error.bar``.
The shared default renderer's source cache is emptied first, so an example
never sees lines cached by an earlier one.
"""

import importlib.util
import sys
from pathlib import Path

import pytest

import tracerr


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Run the sibling app.py and return its module."""
    app_path = Path(request.path).parent / "app.py"
    module_name = f"example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)

    tracerr.default_renderer().cache.clear()
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
        yield module
    finally:
        sys.modules.pop(module_name, None)
