"""
HTTP status classification for Supabase Storage responses

Maps a non-2xx response (or a transport/unexpected exception) to a
StorageFailure with a user-facing message. Wording differs slightly per
operation, classification does not.
"""

from typing import Literal

from core.models.results import FailureReason, StorageFailure

Operation = Literal["upload", "list", "delete"]

_PERMISSION_HINTS: dict[str, str] = {
    "upload": "check bucket policy/permissions",
    "list": "check bucket read permissions",
    "delete": "check delete permissions",
}

_FALLBACK_LABELS: dict[str, str] = {
    "upload": "Upload failed",
    "list": "List failed",
    "delete": "Delete failed",
}


def classify_status(
    operation: Operation, status_code: int, body: str, bucket: str
) -> StorageFailure:
    """
    Classify a non-2xx response

    Args:
        operation: Which storage call produced the response
        status_code: HTTP status code
        body: Raw response body (may be empty)
        bucket: Bucket name, included in list's not-found message

    Returns:
        StorageFailure for the status
    """
    if status_code == 401:
        return StorageFailure(
            message="Authentication failed: check API key",
            reason=FailureReason.AUTHENTICATION,
            status_code=status_code,
        )

    if status_code == 403:
        return StorageFailure(
            message=f"Permission denied: {_PERMISSION_HINTS[operation]}",
            reason=FailureReason.PERMISSION,
            status_code=status_code,
        )

    if status_code == 404:
        message = "Bucket or resource not found"
        if operation == "list":
            message = f"{message}: {bucket}"
        return StorageFailure(
            message=message, reason=FailureReason.NOT_FOUND, status_code=status_code
        )

    # 409/413 only carry meaning for uploads
    if operation == "upload" and status_code == 409:
        return StorageFailure(
            message="Object with this name already exists",
            reason=FailureReason.CONFLICT,
            status_code=status_code,
        )

    if operation == "upload" and status_code == 413:
        return StorageFailure(
            message="File too large",
            reason=FailureReason.PAYLOAD_TOO_LARGE,
            status_code=status_code,
        )

    if status_code >= 500:
        return StorageFailure(
            message=f"Server error ({status_code}): retry later",
            reason=FailureReason.SERVER,
            status_code=status_code,
        )

    if not body and operation == "upload":
        body = "unknown error"
    return StorageFailure(
        message=f"{_FALLBACK_LABELS[operation]} ({status_code}): {body}",
        reason=FailureReason.HTTP,
        status_code=status_code,
    )


def network_failure(error: Exception) -> StorageFailure:
    """Transport-level failure (connection, DNS, timeout)"""
    detail = str(error) or "check internet connection"
    return StorageFailure(message=f"Network error: {detail}", reason=FailureReason.NETWORK)


def unexpected_failure(error: Exception) -> StorageFailure:
    """Anything else raised while performing a call"""
    detail = str(error) or "please try again"
    return StorageFailure(message=f"Unexpected error: {detail}", reason=FailureReason.UNEXPECTED)


def empty_response_failure(status_code: int) -> StorageFailure:
    return StorageFailure(
        message="Empty response received",
        reason=FailureReason.EMPTY_RESPONSE,
        status_code=status_code,
    )


def parse_failure(detail: str, status_code: int) -> StorageFailure:
    return StorageFailure(
        message=f"Failed to parse response: {detail}",
        reason=FailureReason.PARSE,
        status_code=status_code,
    )
