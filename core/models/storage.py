"""
Storage endpoint configuration

Immutable value passed to storage clients at construction time.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StorageConfig(BaseModel):
    """Endpoint, bucket and credential for the object storage API"""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(description="API base URL (e.g., https://xyz.supabase.co)")
    bucket: str = Field(description="Bucket holding the images")
    api_key: str = Field(repr=False, description="Anonymous/public API key")
    timeout_seconds: float = Field(
        default=10.0, gt=0, description="Connect/read/write timeout (each)"
    )

    @field_validator("base_url")
    @classmethod
    def base_url_valid(cls, v):
        if not v.startswith("http://") and not v.startswith("https://"):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("bucket", "api_key")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v
