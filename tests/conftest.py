"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`hexworld` package without requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from hexworld.config import get_settings  # noqa: E402


@pytest.fixture
def clean_settings():
    """Drop cached settings so environment overrides in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
