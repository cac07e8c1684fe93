"""Parameter models for bucket operations.

Every field is optional so callers can express three states: absent
(``None``), present but empty (``""``, ``0``) and populated. The facade
decides which of those are acceptable per operation.

``raw`` holds boto3 request keyword arguments the caller wants forwarded
as-is (``ACL``, ``ContentType``, ``CreateBucketConfiguration`` and so on).
Fields the facade owns are stamped over it.
"""

from datetime import timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class OperationParams(BaseModel):
    """Common behaviour for all parameter models."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def is_empty(self) -> bool:
        """True when no field has been given a value, not even an empty one."""
        return all(getattr(self, name) is None for name in type(self).model_fields)


class NewSessionParams(OperationParams):
    region: Optional[str] = None


class ListBucketsParams(OperationParams):
    """Either an existing client, or a region to create one for."""

    client: Optional[Any] = None
    region: Optional[str] = None


class CreateBucketParams(OperationParams):
    raw: Optional[dict[str, Any]] = None


class DeleteBucketParams(OperationParams):
    raw: Optional[dict[str, Any]] = None


class UploadObjectParams(OperationParams):
    file: Optional[bytes] = None  # b"" is a valid, zero-length object
    key: Optional[str] = None
    raw: Optional[dict[str, Any]] = None


class GetObjectParams(OperationParams):
    key: Optional[str] = None
    raw: Optional[dict[str, Any]] = None


class DeleteObjectParams(OperationParams):
    key: Optional[str] = None
    raw: Optional[dict[str, Any]] = None


class ListObjectsParams(OperationParams):
    """Single-page listing. ``page`` is the StartAfter key of the previous page."""

    prefix: Optional[str] = None
    page: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=0)
    raw: Optional[dict[str, Any]] = None


class PresignGetParams(OperationParams):
    key: Optional[str] = None
    duration: Optional[timedelta] = None
    raw: Optional[dict[str, Any]] = None


class PresignPutParams(OperationParams):
    key: Optional[str] = None
    duration: Optional[timedelta] = None
    raw: Optional[dict[str, Any]] = None
