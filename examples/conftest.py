"""Shared pytest configuration for fragsite examples.

Provides the ``example_site`` fixture that loads a fresh Site from the
``app.py`` file in the same directory as the test, so every test starts
with a cold component index.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_site(request: pytest.FixtureRequest):
    """Load a fresh Site from the sibling app.py next to the test file."""
    app_path = Path(request.path).parent / "app.py"
    module_name = f"example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.site
