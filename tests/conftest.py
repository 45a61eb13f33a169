"""
Pytest configuration for test suite

Markers:
- unit: Fast unit tests (no external dependencies)
- integration: Integration tests (requires a live storage endpoint)
"""

import pytest


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Fast unit tests (no dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (requires STORAGE_API_KEY and network)"
    )


@pytest.fixture(autouse=True)
def reset_settings_singleton():
    """Each test starts without a cached Settings instance"""
    import config.settings as settings_module

    settings_module._settings_instance = None
    yield
    settings_module._settings_instance = None
