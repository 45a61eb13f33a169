"""
Unit tests for settings configuration

Tests YAML + env loading and StorageConfig construction.
"""

import pytest

from config.settings import Settings, get_settings
from core.models.storage import StorageConfig

ENV_VARS = [
    "STORAGE_API_KEY",
    "STORAGE_PROVIDER",
    "STORAGE_BASE_URL",
    "STORAGE_BUCKET",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def storage_yaml(tmp_path):
    path = tmp_path / "storage.yaml"
    path.write_text(
        "provider: supabase\n"
        "supabase:\n"
        "  url: https://demo.supabase.co\n"
        "  bucket: gallery\n"
        "  timeout_seconds: 5\n"
    )
    return str(path)


def make_settings(path, **kwargs):
    return Settings(storage_config_path=path, _env_file=None, **kwargs)


@pytest.mark.unit
class TestStorageSettings:
    """Test storage settings from YAML"""

    def test_values_from_yaml(self, storage_yaml):
        settings = make_settings(storage_yaml)

        assert settings.STORAGE_PROVIDER == "supabase"
        assert settings.STORAGE_BASE_URL == "https://demo.supabase.co"
        assert settings.STORAGE_BUCKET == "gallery"
        assert settings.STORAGE_TIMEOUT_SECONDS == 5.0

    def test_defaults_when_yaml_missing(self, tmp_path):
        settings = make_settings(str(tmp_path / "missing.yaml"))

        assert settings.STORAGE_PROVIDER == "supabase"
        assert settings.STORAGE_BASE_URL == "http://localhost:54321"
        assert settings.STORAGE_BUCKET == "images"
        assert settings.STORAGE_TIMEOUT_SECONDS == 10.0

    def test_empty_supabase_section_uses_defaults(self, tmp_path):
        path = tmp_path / "storage.yaml"
        path.write_text("provider:\nsupabase:\n")

        settings = make_settings(str(path))

        assert settings.STORAGE_PROVIDER == "supabase"
        assert settings.STORAGE_BASE_URL == "http://localhost:54321"
        assert settings.STORAGE_BUCKET == "images"
        assert settings.STORAGE_TIMEOUT_SECONDS == 10.0

    def test_env_overrides_yaml(self, storage_yaml, monkeypatch):
        monkeypatch.setenv("STORAGE_BASE_URL", "https://other.supabase.co")
        monkeypatch.setenv("STORAGE_BUCKET", "uploads")

        settings = make_settings(storage_yaml)

        assert settings.STORAGE_BASE_URL == "https://other.supabase.co"
        assert settings.STORAGE_BUCKET == "uploads"

    def test_storage_config(self, storage_yaml, monkeypatch):
        monkeypatch.setenv("STORAGE_API_KEY", "anon-key")

        config = make_settings(storage_yaml).storage_config

        assert config == StorageConfig(
            base_url="https://demo.supabase.co",
            bucket="gallery",
            api_key="anon-key",
            timeout_seconds=5,
        )

    def test_storage_config_requires_api_key(self, storage_yaml):
        settings = make_settings(storage_yaml)

        with pytest.raises(ValueError, match="STORAGE_API_KEY is not set"):
            settings.storage_config

    def test_bundled_yaml_loads(self):
        """The committed storage.yaml is readable from the project root"""
        settings = Settings(_env_file=None)

        assert settings.STORAGE_PROVIDER == "supabase"
        assert settings.STORAGE_BUCKET == "images"


@pytest.mark.unit
class TestGetSettings:
    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_log_level_default(self):
        assert get_settings().LOG_LEVEL == "INFO"
