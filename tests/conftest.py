"""Pytest configuration and fixtures."""

import threading
from unittest.mock import MagicMock

import pytest

from s3bucket.storage.bucket import Bucket


class CountingSessionFactory:
    """Session factory fake that records every region it was asked for."""

    def __init__(self, client=None, delay=0.0):
        self.client = client if client is not None else MagicMock()
        self.delay = delay
        self.regions = []
        self._lock = threading.Lock()

    @property
    def calls(self):
        return len(self.regions)

    def __call__(self, region):
        with self._lock:
            self.regions.append(region)
        if self.delay:
            threading.Event().wait(self.delay)
        return self.client


@pytest.fixture
def mock_client():
    """Create a mock boto3 S3 client."""
    client = MagicMock()
    client.list_buckets.return_value = {"Buckets": [{"Name": "b1"}], "Owner": {}}
    client.create_bucket.return_value = {"Location": "/b1"}
    client.delete_bucket.return_value = {}
    client.put_object.return_value = {"ETag": '"abc"'}
    client.get_object.return_value = {"Body": MagicMock(), "ContentLength": 4}
    client.delete_object.return_value = {}
    client.list_objects_v2.return_value = {"Contents": [], "IsTruncated": False, "KeyCount": 0}
    client.generate_presigned_url.return_value = (
        "https://b1.s3.us-east-1.amazonaws.com/k1?X-Amz-Expires=3600&X-Amz-Signature=sig"
    )
    return client


@pytest.fixture
def session_factory(mock_client):
    """Counting session factory that hands out ``mock_client``."""
    return CountingSessionFactory(mock_client)


@pytest.fixture
def make_session_factory():
    """The counting session factory class, for tests that need their own."""
    return CountingSessionFactory


@pytest.fixture
def bucket(session_factory):
    """A fresh bucket with no client yet."""
    return Bucket(name="b1", region="us-east-1", session_factory=session_factory)
