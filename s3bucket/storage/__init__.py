"""Storage package: S3 bucket facade."""

from s3bucket.storage.bucket import Bucket, PresignedRequest, list_buckets, new_session
from s3bucket.storage.contracts import (
    ConfigError,
    EmptyInputError,
    MissingFieldError,
    MissingInputError,
    MissingRegionError,
    S3Client,
    SessionFactory,
    StorageError,
    UpstreamError,
)
from s3bucket.storage.factory import build_bucket, make_s3_client

__all__ = [
    "Bucket",
    "PresignedRequest",
    "list_buckets",
    "new_session",
    "build_bucket",
    "make_s3_client",
    "S3Client",
    "SessionFactory",
    "StorageError",
    "MissingInputError",
    "EmptyInputError",
    "MissingFieldError",
    "MissingRegionError",
    "ConfigError",
    "UpstreamError",
]
