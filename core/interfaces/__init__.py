"""Interfaces module - Abstract base classes for storage backends"""

from .storage import DEFAULT_MIME_TYPE, BaseStorageClient

__all__ = [
    "BaseStorageClient",
    "DEFAULT_MIME_TYPE",
]
