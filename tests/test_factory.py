from datetime import timedelta
from unittest.mock import MagicMock
from urllib.parse import urlparse

import boto3
import pytest
from botocore.exceptions import ProfileNotFound

from s3bucket.core.config import Settings
from s3bucket.schemas import PresignGetParams
from s3bucket.storage import factory
from s3bucket.storage.bucket import Bucket
from s3bucket.storage.contracts import ConfigError
from s3bucket.storage.factory import build_bucket, make_s3_client


@pytest.fixture
def offline_aws_env(monkeypatch, tmp_path):
    """Static fake credentials, no shared config files, no custom endpoint."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIDEXAMPLE")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    for name in ("AWS_PROFILE", "AWS_SESSION_TOKEN", "S3_ENDPOINT_URL", "AWS_ENDPOINT_URL", "AWS_ENDPOINT_URL_S3"):
        monkeypatch.delenv(name, raising=False)


def test_make_s3_client_passes_settings(monkeypatch):
    created = {}
    session = MagicMock()
    session.client.return_value = "client"

    def fake_session(region_name):
        created["region"] = region_name
        return session

    monkeypatch.setattr(boto3.session, "Session", fake_session)
    settings = Settings(S3_ENDPOINT_URL="http://minio:9000", S3_ADDRESSING_STYLE="path")

    client = make_s3_client("eu-central-1", settings)

    assert client == "client"
    assert created["region"] == "eu-central-1"
    args, kwargs = session.client.call_args
    assert args == ("s3",)
    assert kwargs["endpoint_url"] == "http://minio:9000"
    assert kwargs["config"].signature_version == "s3v4"
    assert kwargs["config"].s3 == {"addressing_style": "path"}


def test_make_s3_client_wraps_profile_errors(monkeypatch):
    def fake_session(region_name):
        raise ProfileNotFound(profile="nope")

    monkeypatch.setattr(boto3.session, "Session", fake_session)

    with pytest.raises(ConfigError) as excinfo:
        make_s3_client("us-east-1", Settings())

    assert str(excinfo.value).startswith("failed to load SDK config: ")
    assert isinstance(excinfo.value.__cause__, ProfileNotFound)


def test_make_s3_client_rejects_malformed_endpoint(offline_aws_env):
    with pytest.raises(ConfigError) as excinfo:
        make_s3_client("us-east-1", Settings(S3_ENDPOINT_URL="minio:9000"))

    assert str(excinfo.value).startswith("failed to load SDK config: ")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_make_s3_client_real_boto3(offline_aws_env):
    client = make_s3_client("us-west-2", Settings())

    assert client.meta.region_name == "us-west-2"


def test_build_bucket_reads_environment(monkeypatch):
    monkeypatch.setenv("S3_BUCKET", "uploads")
    monkeypatch.setenv("AWS_REGION", "ap-south-1")

    bct = build_bucket()

    assert isinstance(bct, Bucket)
    assert bct.name == "uploads"
    assert bct.region == "ap-south-1"
    assert bct.client is None


def test_build_bucket_session_uses_settings(monkeypatch):
    calls = []

    def fake_make_s3_client(region, settings):
        calls.append((region, settings))
        return "client"

    monkeypatch.setattr(factory, "make_s3_client", fake_make_s3_client)
    settings = Settings(S3_BUCKET="b1", AWS_REGION="us-east-1")

    bct = build_bucket(settings)
    client = bct.new_session()

    assert client == "client"
    assert calls == [("us-east-1", settings)]


def test_presign_get_with_real_client(offline_aws_env):
    bct = Bucket(name="b1", region="us-east-1")

    out = bct.presign_get(PresignGetParams(key="k1", duration=timedelta(minutes=10)))

    url = urlparse(out.url)
    assert out.method == "GET"
    assert url.path.endswith("/k1")
    assert "X-Amz-Expires=600" in url.query
    assert out.signed_header == {"host": [url.netloc]}
