"""
Application Settings - Load from YAML configs + .env secrets

Design:
- Public endpoint config (base URL, bucket, timeouts) → config/providers/storage.yaml
- Secrets (API key) → .env file (gitignored)
- Environment variables override YAML values

Uses Pydantic for validation and type safety
"""

from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models.storage import StorageConfig
from core.utils.config import load_yaml_safe

STORAGE_CONFIG_PATH = "config/providers/storage.yaml"


class Settings(BaseSettings):
    """
    Application settings

    Usage:
        from config.settings import get_settings

        settings = get_settings()
        print(settings.STORAGE_BUCKET)  # From storage.yaml (or env)
        config = settings.storage_config  # Immutable StorageConfig for the client
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
    )

    _storage_yaml: dict = PrivateAttr(default_factory=dict)

    def __init__(self, storage_config_path: str = STORAGE_CONFIG_PATH, **kwargs):
        super().__init__(**kwargs)
        self._storage_yaml = load_yaml_safe(storage_config_path)

    # ============================================
    # LOGGING (.env only)
    # ============================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_DIR: str = Field(default="data/logs", description="Directory for error log files")

    # ============================================
    # STORAGE (YAML + .env)
    # ============================================
    # API key from .env (secret)
    STORAGE_API_KEY: str | None = Field(default=None)

    # Optional overrides of storage.yaml
    STORAGE_PROVIDER_OVERRIDE: str | None = Field(default=None, alias="STORAGE_PROVIDER")
    STORAGE_BASE_URL_OVERRIDE: str | None = Field(default=None, alias="STORAGE_BASE_URL")
    STORAGE_BUCKET_OVERRIDE: str | None = Field(default=None, alias="STORAGE_BUCKET")

    @property
    def supabase_section(self) -> dict:
        """supabase: block of storage.yaml ({} when missing or empty)"""
        return self._storage_yaml.get("supabase") or {}

    @property
    def STORAGE_PROVIDER(self) -> str:
        """Storage backend from storage.yaml (currently only supabase)"""
        return self.STORAGE_PROVIDER_OVERRIDE or self._storage_yaml.get("provider") or "supabase"

    @property
    def STORAGE_BASE_URL(self) -> str:
        """Storage API base URL from storage.yaml"""
        return self.STORAGE_BASE_URL_OVERRIDE or self.supabase_section.get(
            "url", "http://localhost:54321"
        )

    @property
    def STORAGE_BUCKET(self) -> str:
        """Image bucket name from storage.yaml"""
        return self.STORAGE_BUCKET_OVERRIDE or self.supabase_section.get(
            "bucket", "images"
        )

    @property
    def STORAGE_TIMEOUT_SECONDS(self) -> float:
        """Connect/read/write timeout from storage.yaml"""
        return float(self.supabase_section.get("timeout_seconds", 10))

    @property
    def storage_config(self) -> StorageConfig:
        """
        Immutable client configuration

        Raises:
            ValueError: If STORAGE_API_KEY is not set or values are invalid
        """
        if not self.STORAGE_API_KEY:
            raise ValueError("STORAGE_API_KEY is not set (add it to .env)")
        return StorageConfig(
            base_url=self.STORAGE_BASE_URL,
            bucket=self.STORAGE_BUCKET,
            api_key=self.STORAGE_API_KEY,
            timeout_seconds=self.STORAGE_TIMEOUT_SECONDS,
        )


# Singleton pattern
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton)

    Returns:
        Settings instance

    Example:
        >>> settings = get_settings()
        >>> print(settings.STORAGE_BUCKET)
        images
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
