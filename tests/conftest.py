"""Pytest configuration and fixtures."""

import os

import pytest

from page_intel.core.config import get_settings


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["PAGE_INTEL_ENV"] = "test"
    os.environ["SECTION_LOCK_MATCH"] = "fuzzy"
    os.environ["MARKET_RESEARCH_BONUS_POINTS"] = "10"
    get_settings.cache_clear()


@pytest.fixture
def clear_settings_cache():
    """Drop cached settings before and after a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
