"""Bucket facade over the boto3 S3 client.

Each operation validates its inputs, stamps the fields it owns onto the
caller's raw request and forwards the call. Responses come back exactly as
boto3 returns them; failures are wrapped in ``UpstreamError`` and never
retried here.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Iterator, Mapping
from urllib.parse import urlparse

from s3bucket.schemas.params import (
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
from s3bucket.storage.contracts import (
    EmptyInputError,
    MissingFieldError,
    MissingInputError,
    MissingRegionError,
    S3Client,
    SessionFactory,
    UpstreamError,
)
from s3bucket.storage.factory import make_s3_client

logger = logging.getLogger(__name__)

# MaxKeys is a signed 32-bit integer on the wire.
MAX_KEYS_LIMIT = 2**31 - 1

# Regions where CreateBucket must not carry a LocationConstraint.
_DEFAULT_LOCATION_REGIONS = frozenset({"us-east-1"})


@dataclass(frozen=True)
class PresignedRequest:
    """A presigned request: anyone holding it may perform ``method`` on ``url``."""

    url: str
    method: str
    signed_header: Mapping[str, list[str]] = field(default_factory=dict)


def _require_input(params: Any, **context: Any) -> None:
    if params is None:
        raise MissingInputError(**context)
    if params.is_empty():
        raise EmptyInputError(**context)


def _check_region(region: str | None, **context: Any) -> str:
    if not region:
        raise MissingRegionError(**context)
    return region


def new_session(
    params: NewSessionParams | None,
    session_factory: SessionFactory | None = None,
) -> S3Client:
    """Create an S3 client for ``params.region``.

    Raises:
        MissingInputError: ``params`` is None.
        EmptyInputError: no region given.
        MissingRegionError: region is an empty string.
        ConfigError: the SDK configuration could not be loaded.
    """
    _require_input(params, op="new_session")
    region = _check_region(params.region, op="new_session")
    return (session_factory or make_s3_client)(region)


def list_buckets(
    params: ListBucketsParams | None,
    session_factory: SessionFactory | None = None,
) -> Mapping[str, Any]:
    """List all buckets owned by the caller's credentials.

    Uses ``params.client`` when given, otherwise opens a session for
    ``params.region``.
    """
    _require_input(params, op="list_buckets")

    client = params.client
    if client is None:
        client = new_session(NewSessionParams(region=params.region), session_factory)

    try:
        return client.list_buckets()
    except Exception as exc:
        raise UpstreamError("list buckets", exc) from exc


def _object_url(name: str, region: str, key: str) -> str:
    # Key is not percent-encoded.
    return f"https://{name}.s3.{region}.amazonaws.com/{key}"


def _signed_header(url: str) -> dict[str, list[str]]:
    host = urlparse(url).netloc
    return {"host": [host]} if host else {}


class Bucket:
    """A named bucket in a region, with a lazily created client.

    The client is created at most once, on the first operation that needs
    it, and reused afterwards. ``session_factory`` turns a region into a
    client; it defaults to boto3 with the ambient credential chain.
    """

    def __init__(
        self,
        name: str | None = None,
        region: str | None = None,
        client: S3Client | None = None,
        session_factory: SessionFactory | None = None,
    ):
        self.name = name
        self.region = region
        self.client = client
        self._session_factory = session_factory or make_s3_client
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Bucket(name={self.name!r}, region={self.region!r})"

    # -------
    # Session
    # -------
    def new_session(self) -> S3Client:
        """Create a client for this bucket's region and keep it."""
        client = new_session(NewSessionParams(region=self.region), self._session_factory)
        with self._lock:
            self.client = client
        logger.debug("Opened session for bucket %s in %s", self.name, self.region)
        return client

    def _ensure_client(self) -> S3Client:
        if self.client is not None:
            return self.client
        with self._lock:
            if self.client is None:
                self.client = new_session(
                    NewSessionParams(region=self.region), self._session_factory
                )
                logger.debug("Opened session for bucket %s in %s", self.name, self.region)
            return self.client

    def _check_bucket(self, op: str) -> None:
        if not self.name:
            raise MissingFieldError("Name", op=op)
        if self.client is None:
            _check_region(self.region, op=op, bucket=self.name)

    def _call(self, op: str, method: str, request: dict[str, Any], key: str | None = None) -> Any:
        client = self._ensure_client()
        logger.debug("%s bucket=%s key=%s", method, self.name, key)
        try:
            return getattr(client, method)(**request)
        except Exception as exc:
            raise UpstreamError(op, exc, bucket=self.name, key=key) from exc

    # -------
    # Buckets
    # -------
    def create(self, params: CreateBucketParams | None = None) -> Mapping[str, Any]:
        """Create this bucket.

        Outside us-east-1 a LocationConstraint for the bucket's region is
        added unless ``raw`` already carries a CreateBucketConfiguration.
        """
        self._check_bucket("create bucket")

        request = dict(params.raw or {}) if params is not None else {}
        if (
            "CreateBucketConfiguration" not in request
            and self.region
            and self.region not in _DEFAULT_LOCATION_REGIONS
        ):
            request["CreateBucketConfiguration"] = {"LocationConstraint": self.region}
        request["Bucket"] = self.name

        return self._call("create bucket", "create_bucket", request)

    def delete(self, params: DeleteBucketParams | None = None) -> Mapping[str, Any]:
        """Delete this bucket. S3 refuses unless it is empty."""
        self._check_bucket("delete bucket")

        request = dict(params.raw or {}) if params is not None else {}
        request["Bucket"] = self.name

        return self._call("delete bucket", "delete_bucket", request)

    # -------
    # Objects
    # -------
    def upload_object(self, params: UploadObjectParams | None) -> tuple[Mapping[str, Any], str]:
        """Put ``params.file`` under ``params.key``.

        Returns the put_object response and the object's virtual-hosted URL.
        """
        self._check_bucket("upload object")
        _require_input(params, op="upload object", bucket=self.name)
        if params.file is None:
            raise MissingFieldError("File", op="upload object", bucket=self.name)
        if not params.key:
            raise MissingFieldError("Key", op="upload object", bucket=self.name)

        region = self.region or _client_region(self.client)
        if not region:
            raise MissingRegionError(op="upload object", bucket=self.name, key=params.key)

        request = dict(params.raw or {})
        request["Body"] = bytes(params.file)
        request["Bucket"] = self.name
        request["Key"] = params.key

        out = self._call("upload object", "put_object", request, key=params.key)
        return out, _object_url(self.name, region, params.key)

    def get_object(self, params: GetObjectParams | None) -> Mapping[str, Any]:
        """Fetch an object. The response ``Body`` is a stream the caller must read."""
        self._check_bucket("get object")
        _require_input(params, op="get object", bucket=self.name)
        if not params.key:
            raise MissingFieldError("Key", op="get object", bucket=self.name)

        request = dict(params.raw or {})
        request["Bucket"] = self.name
        request["Key"] = params.key

        return self._call("get object", "get_object", request, key=params.key)

    def delete_object(self, params: DeleteObjectParams | None) -> Mapping[str, Any]:
        self._check_bucket("delete object")
        _require_input(params, op="delete object", bucket=self.name)
        if not params.key:
            raise MissingFieldError("Key", op="delete object", bucket=self.name)

        request = dict(params.raw or {})
        request["Bucket"] = self.name
        request["Key"] = params.key

        return self._call("delete object", "delete_object", request, key=params.key)

    def _list_request(self, params: ListObjectsParams | None) -> dict[str, Any]:
        if params is None:
            return {"Bucket": self.name}

        request = dict(params.raw or {})
        request["Bucket"] = self.name
        if params.prefix:
            request["Prefix"] = params.prefix
        if params.page:
            request["StartAfter"] = params.page
        if params.limit:
            request["MaxKeys"] = min(params.limit, MAX_KEYS_LIMIT)
        return request

    def list_objects(self, params: ListObjectsParams | None = None) -> Mapping[str, Any]:
        """Return one list_objects_v2 page.

        Follow ``NextContinuationToken`` (via ``raw``) or pass the last key
        as ``page`` to get the next one, or use ``iter_objects``.
        """
        self._check_bucket("list objects")
        request = self._list_request(params)
        return self._call("list objects", "list_objects_v2", request)

    def iter_objects(self, params: ListObjectsParams | None = None) -> Iterator[Mapping[str, Any]]:
        """Yield every object entry, fetching pages as needed.

        Validation happens on the call, not on the first iteration.
        """
        self._check_bucket("list objects")
        return self._iter_pages(self._list_request(params))

    def _iter_pages(self, request: dict[str, Any]) -> Iterator[Mapping[str, Any]]:
        while True:
            page = self._call("list objects", "list_objects_v2", request)
            yield from page.get("Contents", []) or []
            token = page.get("NextContinuationToken")
            if not page.get("IsTruncated") or not token:
                return
            request = {**request, "ContinuationToken": token}

    # -------------
    # Presigned URLs
    # -------------
    def _presign(
        self,
        op: str,
        client_method: str,
        http_method: str,
        params: PresignGetParams | PresignPutParams | None,
    ) -> PresignedRequest:
        self._check_bucket(op)
        _require_input(params, op=op, bucket=self.name)
        if not params.key:
            raise MissingFieldError("Key", op=op, bucket=self.name)
        if not params.duration or params.duration <= timedelta(0):
            raise MissingFieldError("Duration", op=op, bucket=self.name, key=params.key)

        request = dict(params.raw or {})
        request["Bucket"] = self.name
        request["Key"] = params.key
        expires = math.ceil(params.duration.total_seconds())

        url = self._call(
            op,
            "generate_presigned_url",
            {"ClientMethod": client_method, "Params": request, "ExpiresIn": expires},
            key=params.key,
        )
        return PresignedRequest(url=url, method=http_method, signed_header=_signed_header(url))

    def presign_get(self, params: PresignGetParams | None) -> PresignedRequest:
        """Presign a GET of ``params.key`` valid for ``params.duration``."""
        return self._presign("presign get", "get_object", "GET", params)

    def presign_put(self, params: PresignPutParams | None) -> PresignedRequest:
        """Presign a PUT to ``params.key`` valid for ``params.duration``."""
        return self._presign("presign put", "put_object", "PUT", params)


def _client_region(client: Any) -> str:
    region = getattr(getattr(client, "meta", None), "region_name", None)
    return region if isinstance(region, str) else ""


__all__ = ["Bucket", "PresignedRequest", "new_session", "list_buckets", "MAX_KEYS_LIMIT"]
