"""
Supabase Storage implementation of the image storage client

Talks to the Storage REST API directly with httpx:
- POST   /storage/v1/object/{bucket}/{name}   upload raw bytes
- POST   /storage/v1/object/list/{bucket}     list first page of names
- DELETE /storage/v1/object/{bucket}          delete by name

Every call resolves to a result model; request failures are never raised.
"""

import logging
import time
from datetime import datetime
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from core.interfaces.storage import DEFAULT_MIME_TYPE, BaseStorageClient
from core.models.results import (
    DeleteResult,
    DeleteSuccess,
    ListResult,
    ListSuccess,
    StorageFailure,
    UploadResult,
    UploadSuccess,
)
from core.models.storage import StorageConfig
from providers.supabase.errors import (
    Operation,
    classify_status,
    empty_response_failure,
    network_failure,
    parse_failure,
    unexpected_failure,
)

logger = logging.getLogger(__name__)

# Single page only; there is no pagination
LIST_PAGE_SIZE = 100


class StoredObject(BaseModel):
    """Entry of the list endpoint response (only the name is used)"""

    name: str


_LIST_ADAPTER = TypeAdapter(list[StoredObject])


def default_object_name(now: datetime | None = None) -> str:
    """
    Fallback object key for files without a usable name

    Args:
        now: Timestamp to derive the name from (default: current time)

    Returns:
        Name like image_1704067200000.jpg
    """
    millis = int(now.timestamp() * 1000) if now else time.time_ns() // 1_000_000
    return f"image_{millis}.jpg"


class SupabaseStorageClient(BaseStorageClient):
    """
    Supabase Storage REST client

    One httpx.AsyncClient (connection pool) is shared by all calls, so
    upload/list/delete may run concurrently. The client keeps no per-call
    state and applies no retries.

    Example:
        >>> config = StorageConfig(base_url="https://xyz.supabase.co", bucket="images", api_key="...")
        >>> async with SupabaseStorageClient(config) as client:
        ...     result = await client.upload_image("cat.jpg", data)
    """

    def __init__(
        self,
        config: StorageConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize storage client

        Args:
            config: Endpoint, bucket and API key
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.config = config
        timeout = config.timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.api_key}",
                "apikey": config.api_key,
            },
            timeout=httpx.Timeout(connect=timeout, read=timeout, write=timeout, pool=timeout),
            transport=transport,
        )
        logger.info(f"SupabaseStorageClient initialized ({config.base_url}, bucket={config.bucket})")

    @property
    def bucket(self) -> str:
        return self.config.bucket

    def _object_path(self, name: str) -> str:
        return f"/storage/v1/object/{self.bucket}/{quote(name, safe='/')}"

    def public_url(self, name: str) -> str:
        """
        Public download URL of an object

        Only resolves for public buckets. No request is made.
        """
        return (
            f"{self.config.base_url}/storage/v1/object/public/"
            f"{self.bucket}/{quote(name, safe='/')}"
        )

    async def _send(self, operation: Operation, method: str, path: str, **kwargs):
        """
        Send one request

        Returns:
            httpx.Response, or StorageFailure if the request could not complete
        """
        logger.debug(f"{operation}: {method} {path}")
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"✗ Storage {operation} network error: {e}")
            return network_failure(e)
        except Exception as e:
            logger.error(f"✗ Storage {operation} unexpected error: {e}", exc_info=True)
            return unexpected_failure(e)

    def _fail(self, operation: Operation, response: httpx.Response) -> StorageFailure:
        failure = classify_status(operation, response.status_code, response.text, self.bucket)
        logger.warning(f"✗ Storage {operation} failed: {failure.message}")
        return failure

    async def upload_image(
        self, name: str, data: bytes, mime_type: str = DEFAULT_MIME_TYPE
    ) -> UploadResult:
        """
        Upload image bytes under the given name

        Args:
            name: Object key
            data: File content
            mime_type: Content type (default image/jpeg)

        Returns:
            UploadSuccess, or StorageFailure (409 for existing names, 413 for large files)
        """
        response = await self._send(
            "upload",
            "POST",
            self._object_path(name),
            content=data,
            headers={"Content-Type": mime_type},
        )
        if isinstance(response, StorageFailure):
            return response

        try:
            if response.is_success:
                logger.info(f"✓ Uploaded {name} ({len(data)} bytes) to {self.bucket}")
                return UploadSuccess()
            return self._fail("upload", response)
        except Exception as e:
            return unexpected_failure(e)

    async def list_images(self) -> ListResult:
        """
        List object names in the bucket

        Only the first LIST_PAGE_SIZE entries are returned. An empty body is a
        failure, not an empty list.

        Returns:
            ListSuccess with names in server order, or StorageFailure
        """
        response = await self._send(
            "list",
            "POST",
            f"/storage/v1/object/list/{self.bucket}",
            json={"prefix": "", "limit": LIST_PAGE_SIZE, "offset": 0},
        )
        if isinstance(response, StorageFailure):
            return response

        try:
            if not response.is_success:
                return self._fail("list", response)

            body = response.text
            if not body:
                logger.warning("✗ Storage list returned an empty body")
                return empty_response_failure(response.status_code)

            try:
                objects = _LIST_ADAPTER.validate_json(body)
            except ValidationError as e:
                detail = "; ".join(err["msg"] for err in e.errors())
                logger.warning(f"✗ Storage list response could not be parsed: {detail}")
                return parse_failure(detail, response.status_code)

            names = [obj.name for obj in objects]
            logger.info(f"✓ Listed {len(names)} objects in {self.bucket}")
            return ListSuccess(items=names)
        except Exception as e:
            return unexpected_failure(e)

    async def delete_images(self, names: list[str]) -> DeleteResult:
        """
        Delete objects by name

        The backend answer is treated as all-or-nothing; partial deletions are
        not reported.

        Args:
            names: Object keys (order preserved in the request)

        Returns:
            DeleteSuccess (immediately for an empty list), or StorageFailure
        """
        if not names:
            return DeleteSuccess()

        response = await self._send(
            "delete",
            "DELETE",
            f"/storage/v1/object/{self.bucket}",
            json={"prefixes": list(names)},
        )
        if isinstance(response, StorageFailure):
            return response

        try:
            if response.is_success:
                logger.info(f"✓ Deleted {len(names)} objects from {self.bucket}")
                return DeleteSuccess()
            return self._fail("delete", response)
        except Exception as e:
            return unexpected_failure(e)

    async def close(self) -> None:
        """Close the connection pool"""
        await self._client.aclose()
        logger.info("✓ Storage client closed")
