"""Factory package - Dependency injection for storage clients"""

from .client_factory import create_storage_client

__all__ = [
    "create_storage_client",
]
