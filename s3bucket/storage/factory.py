"""Factories for building S3 clients and buckets from environment configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError

from s3bucket.core.config import Settings
from s3bucket.storage.contracts import ConfigError, S3Client

if TYPE_CHECKING:
    from s3bucket.storage.bucket import Bucket

logger = logging.getLogger(__name__)


def _client_config(settings: Settings) -> BotoConfig:
    return BotoConfig(
        signature_version=settings.S3_SIGNATURE_VERSION,
        s3={"addressing_style": settings.S3_ADDRESSING_STYLE},
    )


def make_s3_client(region: str, settings: Settings | None = None) -> S3Client:
    """Create an S3 client for ``region`` using boto3's default credential chain.

    Raises:
        ConfigError: boto3 could not load a profile or build the client.
    """
    settings = settings or Settings()
    try:
        session = boto3.session.Session(region_name=region)
        client = session.client(
            "s3",
            endpoint_url=settings.S3_ENDPOINT_URL or None,
            config=_client_config(settings),
        )
    except (BotoCoreError, ValueError) as exc:
        raise ConfigError(f"failed to load SDK config: {exc}", op="new_session") from exc

    logger.debug("Created S3 client for region %s", region)
    return client


def build_bucket(settings: Settings | None = None) -> "Bucket":
    """Build a Bucket from environment variables.

    Environment variables:
        S3_BUCKET: Bucket name
        AWS_REGION: Region the bucket lives in
        S3_ENDPOINT_URL: Optional S3-compatible endpoint (e.g., http://localhost:9000)
        S3_ADDRESSING_STYLE: virtual or path (default: virtual)
        S3_SIGNATURE_VERSION: Signature version for requests and presigning (default: s3v4)

    No client is created here; the bucket opens its session on first use.
    """
    from s3bucket.storage.bucket import Bucket

    settings = settings or Settings()

    def session_factory(region: str) -> S3Client:
        return make_s3_client(region, settings)

    return Bucket(
        name=settings.S3_BUCKET or None,
        region=settings.AWS_REGION or None,
        session_factory=session_factory,
    )


__all__ = ["make_s3_client", "build_bucket"]
