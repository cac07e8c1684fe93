"""Parameter schemas for bucket operations."""

from s3bucket.schemas.params import (
    CreateBucketParams,
    DeleteBucketParams,
    DeleteObjectParams,
    GetObjectParams,
    ListBucketsParams,
    ListObjectsParams,
    NewSessionParams,
    OperationParams,
    PresignGetParams,
    PresignPutParams,
    UploadObjectParams,
)

__all__ = [
    "CreateBucketParams",
    "DeleteBucketParams",
    "DeleteObjectParams",
    "GetObjectParams",
    "ListBucketsParams",
    "ListObjectsParams",
    "NewSessionParams",
    "OperationParams",
    "PresignGetParams",
    "PresignPutParams",
    "UploadObjectParams",
]
