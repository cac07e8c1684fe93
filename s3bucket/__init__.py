"""Thin, validating wrapper around the boto3 S3 client."""

from s3bucket.schemas import (
    CreateBucketParams,
    DeleteBucketParams,
    DeleteObjectParams,
    GetObjectParams,
    ListBucketsParams,
    ListObjectsParams,
    NewSessionParams,
    PresignGetParams,
    PresignPutParams,
    UploadObjectParams,
)
from s3bucket.storage import (
    Bucket,
    ConfigError,
    EmptyInputError,
    MissingFieldError,
    MissingInputError,
    MissingRegionError,
    PresignedRequest,
    StorageError,
    UpstreamError,
    build_bucket,
    list_buckets,
    new_session,
)

__version__ = "0.1.0"

__all__ = [
    "Bucket",
    "PresignedRequest",
    "build_bucket",
    "list_buckets",
    "new_session",
    "CreateBucketParams",
    "DeleteBucketParams",
    "DeleteObjectParams",
    "GetObjectParams",
    "ListBucketsParams",
    "ListObjectsParams",
    "NewSessionParams",
    "PresignGetParams",
    "PresignPutParams",
    "UploadObjectParams",
    "StorageError",
    "MissingInputError",
    "EmptyInputError",
    "MissingFieldError",
    "MissingRegionError",
    "ConfigError",
    "UpstreamError",
]
