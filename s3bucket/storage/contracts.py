"""Storage interfaces and error types."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, runtime_checkable


class StorageError(Exception):
    """Base error for every failure raised by the bucket facade."""

    def __init__(
        self,
        message: str,
        *,
        op: str | None = None,
        bucket: str | None = None,
        key: str | None = None,
    ):
        self.message = message
        self.op = op
        self.bucket = bucket
        self.key = key
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class MissingInputError(StorageError):
    """The required parameter object was not supplied at all."""

    def __init__(self, **context: Any):
        super().__init__("nil input", **context)


class EmptyInputError(StorageError):
    """The parameter object was supplied but every field is unset."""

    def __init__(self, **context: Any):
        super().__init__("empty input", **context)


class MissingFieldError(StorageError):
    """A named required field is absent or empty."""

    def __init__(self, field: str, **context: Any):
        self.field = field
        super().__init__(f"empty '{field}' param", **context)


class ConfigError(StorageError):
    """Session or SDK configuration could not be set up."""


class MissingRegionError(MissingFieldError, ConfigError):
    """No region to create a session with."""

    def __init__(self, **context: Any):
        super().__init__("Region", **context)


class UpstreamError(StorageError):
    """Wraps an exception raised by the S3 client with operation context."""

    def __init__(
        self,
        op: str,
        cause: BaseException,
        *,
        bucket: str | None = None,
        key: str | None = None,
    ):
        self.cause = cause
        super().__init__(f"failed to {op}: {cause}", op=op, bucket=bucket, key=key)


@runtime_checkable
class S3Client(Protocol):
    """The subset of the boto3 S3 client the facade forwards to."""

    def list_buckets(self, **kwargs: Any) -> Mapping[str, Any]:
        ...

    def create_bucket(self, **kwargs: Any) -> Mapping[str, Any]:
        ...

    def delete_bucket(self, **kwargs: Any) -> Mapping[str, Any]:
        ...

    def put_object(self, **kwargs: Any) -> Mapping[str, Any]:
        ...

    def get_object(self, **kwargs: Any) -> Mapping[str, Any]:
        ...

    def delete_object(self, **kwargs: Any) -> Mapping[str, Any]:
        ...

    def list_objects_v2(self, **kwargs: Any) -> Mapping[str, Any]:
        ...

    def generate_presigned_url(
        self,
        ClientMethod: str,
        Params: Mapping[str, Any] | None = None,
        ExpiresIn: int = 3600,
        HttpMethod: str | None = None,
    ) -> str:
        ...


# Builds an S3 client for a region, reading ambient credentials.
SessionFactory = Callable[[str], S3Client]


__all__ = [
    "StorageError",
    "MissingInputError",
    "EmptyInputError",
    "MissingFieldError",
    "ConfigError",
    "MissingRegionError",
    "UpstreamError",
    "S3Client",
    "SessionFactory",
]
