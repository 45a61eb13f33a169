"""
Integration test configuration

Runs against the storage project configured in config/providers/storage.yaml
and .env. Skipped unless STORAGE_API_KEY is available.
"""

import pytest

from config.settings import get_settings


@pytest.fixture
def storage_settings():
    settings = get_settings()
    if not settings.STORAGE_API_KEY:
        pytest.skip("STORAGE_API_KEY not configured")
    return settings
