"""
Storage operation results

Every storage call resolves to exactly one of these models:
- UploadSuccess / ListSuccess / DeleteSuccess: the operation completed
- StorageFailure: the operation failed, with a human-readable message

Callers are expected to match exhaustively on the result:

    >>> match await client.list_images():
    ...     case ListSuccess(items=items):
    ...         render(items)
    ...     case StorageFailure(message=message):
    ...         show_error(message)
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FailureReason(str, Enum):
    """Cause of a failed storage operation"""

    AUTHENTICATION = "authentication"  # 401
    PERMISSION = "permission"  # 403
    NOT_FOUND = "not_found"  # 404
    CONFLICT = "conflict"  # 409, upload only
    PAYLOAD_TOO_LARGE = "payload_too_large"  # 413, upload only
    SERVER = "server"  # >= 500
    HTTP = "http"  # any other non-2xx
    EMPTY_RESPONSE = "empty_response"
    PARSE = "parse"
    NETWORK = "network"
    UNEXPECTED = "unexpected"


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return not isinstance(self, StorageFailure)


class UploadSuccess(_Result):
    """Object was stored"""


class ListSuccess(_Result):
    """Object names in the order returned by the server"""

    items: list[str] = Field(default_factory=list, description="Object names")


class DeleteSuccess(_Result):
    """Objects were removed (or there was nothing to remove)"""


class StorageFailure(_Result):
    """
    Failed storage operation

    Shared by upload, list and delete. The message is meant to be shown to
    the user as-is.
    """

    message: str = Field(description="Human-readable error message")
    reason: FailureReason = Field(description="Failure classification")
    status_code: int | None = Field(
        default=None, description="HTTP status, if a response was received"
    )


UploadResult = UploadSuccess | StorageFailure
ListResult = ListSuccess | StorageFailure
DeleteResult = DeleteSuccess | StorageFailure
