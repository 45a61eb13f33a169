"""Models module - Pydantic data models"""

from .results import (
    DeleteResult,
    DeleteSuccess,
    FailureReason,
    ListResult,
    ListSuccess,
    StorageFailure,
    UploadResult,
    UploadSuccess,
)
from .storage import StorageConfig

__all__ = [
    "StorageConfig",
    "FailureReason",
    "StorageFailure",
    "UploadSuccess",
    "ListSuccess",
    "DeleteSuccess",
    "UploadResult",
    "ListResult",
    "DeleteResult",
]
