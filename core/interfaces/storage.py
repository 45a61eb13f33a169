from abc import ABC, abstractmethod

from core.models.results import DeleteResult, ListResult, UploadResult

DEFAULT_MIME_TYPE = "image/jpeg"


class BaseStorageClient(ABC):
    """
    Abstract interface for image object storage

    Operations never raise on request failure: every outcome is returned as
    a Success or StorageFailure result.

    Implementations:
    - SupabaseStorageClient (Supabase Storage REST API)
    """

    @abstractmethod
    async def upload_image(
        self, name: str, data: bytes, mime_type: str = DEFAULT_MIME_TYPE
    ) -> UploadResult:
        """
        Upload an image

        Args:
            name: Object key inside the bucket
            data: File content as bytes
            mime_type: Content type sent with the payload

        Returns:
            UploadSuccess or StorageFailure
        """

    @abstractmethod
    async def list_images(self) -> ListResult:
        """
        List object names in the bucket (first page only)

        Returns:
            ListSuccess with names in server order, or StorageFailure
        """

    @abstractmethod
    async def delete_images(self, names: list[str]) -> DeleteResult:
        """
        Delete objects by name

        Args:
            names: Object keys to remove (empty list is a no-op)

        Returns:
            DeleteSuccess or StorageFailure
        """

    @abstractmethod
    def public_url(self, name: str) -> str:
        """Public download URL of an object"""

    @abstractmethod
    async def close(self) -> None:
        """Close client"""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
