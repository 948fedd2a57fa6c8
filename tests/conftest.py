"""
Shared test fixtures for the lcgen test suite.

Provides fixtures for:
- Hermetic settings (no LCGEN_* leakage, fresh settings cache)
- Reference generator parameters
"""

import logging

import pytest

from lcgen.core.config import get_settings
from lcgen.core.models import LcgParams


# =============================================================================
# Settings Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without LCGEN_* variables, a stray .env file, or a leftover log level."""
    for name in (
        "LCGEN_RANGE_START",
        "LCGEN_RANGE_END",
        "LCGEN_MULTIPLIER",
        "LCGEN_INCREMENT",
        "LCGEN_SEED",
        "LCGEN_COUNT",
        "LCGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logging.getLogger("lcgen").setLevel(logging.NOTSET)


# =============================================================================
# Reference Parameters
# =============================================================================


@pytest.fixture
def small_params() -> LcgParams:
    """Range [-500, 150) with a=7, c=3, seed=5."""
    return LcgParams(start=-500, end=150, multiplier=7, increment=3, seed=5)


@pytest.fixture
def small_sequence() -> list[int]:
    """First four values produced by small_params."""
    return [-462, -231, 86, -295]
