"""
Client factory - Auto-create clients based on configuration

Dependency injection pattern: callers depend on BaseStorageClient only
"""

import logging

import httpx

from config.settings import get_settings
from core.interfaces.storage import BaseStorageClient

logger = logging.getLogger(__name__)


def create_storage_client(transport: httpx.AsyncBaseTransport | None = None) -> BaseStorageClient:
    """
    Create storage client based on STORAGE_PROVIDER config

    Args:
        transport: Optional httpx transport passed through to the client

    Returns:
        BaseStorageClient: SupabaseStorageClient

    Raises:
        ValueError: If the provider is unsupported or STORAGE_API_KEY is missing

    Examples:
        >>> # storage.yaml: provider: supabase, .env: STORAGE_API_KEY=...
        >>> client = create_storage_client()  # Returns SupabaseStorageClient
    """
    settings = get_settings()
    provider = settings.STORAGE_PROVIDER.lower()

    if provider == "supabase":
        from providers.supabase.storage import SupabaseStorageClient

        logger.info(f"✓ Creating SupabaseStorageClient ({settings.STORAGE_BASE_URL})")
        return SupabaseStorageClient(settings.storage_config, transport=transport)

    else:
        raise ValueError(f"Unsupported storage provider: {provider}. Supported: supabase")
