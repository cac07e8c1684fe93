#!/usr/bin/env python3
"""
End-to-end demo against a real S3 account.

Creates a throwaway bucket, walks through every Bucket operation and
removes everything it created.

Prerequisites:
    1. AWS credentials available to boto3 (env vars, ~/.aws, or instance role)
    2. pip install -e ".[demo]"

Usage:
    python scripts/e2e_demo.py

    # Another region:
    python scripts/e2e_demo.py --region eu-west-1

    # Output raw JSON of the listing:
    python scripts/e2e_demo.py --json
"""

import argparse
import json
import sys
import uuid
from datetime import timedelta

import httpx

from s3bucket import (
    Bucket,
    DeleteObjectParams,
    GetObjectParams,
    ListBucketsParams,
    ListObjectsParams,
    PresignGetParams,
    PresignPutParams,
    StorageError,
    UploadObjectParams,
    list_buckets,
)
from s3bucket.core.logging import setup_logging

DEFAULT_REGION = "us-east-1"
OBJECT_COUNT = 3


def cleanup(bucket: Bucket, keys: list[str]) -> None:
    """Delete demo objects and the bucket, reporting but not raising failures."""
    for key in keys:
        try:
            bucket.delete_object(DeleteObjectParams(key=key))
        except StorageError as e:
            print(f"  Cleanup failed for {key}: {e}")
    try:
        bucket.delete()
        print(f"  Deleted bucket {bucket.name}")
    except StorageError as e:
        print(f"  Cleanup failed for bucket: {e}")


def main():
    parser = argparse.ArgumentParser(description="E2E demo for the S3 bucket facade")
    parser.add_argument("--region", "-r", default=DEFAULT_REGION, help="AWS region")
    parser.add_argument("--json", action="store_true", help="Output raw JSON of the listing")
    args = parser.parse_args()

    setup_logging()

    print("=" * 60)
    print("S3 BUCKET FACADE - E2E DEMO")
    print("=" * 60)

    bucket = Bucket(name=f"s3bucket-demo-{uuid.uuid4()}", region=args.region)
    keys: list[str] = []

    # Step 1: Create bucket
    print(f"\n[1/6] Creating bucket {bucket.name}...")
    try:
        bucket.create()
    except StorageError as e:
        print(f"  Error: {e}")
        sys.exit(1)
    print("  Bucket created")

    try:
        # Step 2: List buckets with the bucket's own client
        print("\n[2/6] Listing buckets...")
        out = list_buckets(ListBucketsParams(client=bucket.client))
        names = [b["Name"] for b in out.get("Buckets", [])]
        print(f"  Found {len(names)} buckets, ours included: {bucket.name in names}")

        # Step 3: Upload objects
        print(f"\n[3/6] Uploading {OBJECT_COUNT} objects...")
        for i in range(OBJECT_COUNT):
            key = f"demo/{i}-{uuid.uuid4().hex[:8]}.txt"
            _, url = bucket.upload_object(UploadObjectParams(file=f"hello {i}".encode(), key=key))
            keys.append(key)
            print(f"  {url}")

        # Step 4: List and read back
        print("\n[4/6] Listing and reading objects...")
        page = bucket.list_objects(ListObjectsParams(prefix="demo/", limit=OBJECT_COUNT))
        listed = [obj["Key"] for obj in page.get("Contents", [])]
        print(f"  Listed {len(listed)} objects (truncated: {page.get('IsTruncated')})")
        if args.json:
            print(json.dumps(page, indent=2, default=str))

        obj = bucket.get_object(GetObjectParams(key=keys[0]))
        print(f"  {keys[0]}: {obj['Body'].read()!r}")

        # Step 5: Presigned PUT
        print("\n[5/6] Uploading through a presigned PUT...")
        put_key = f"demo/presigned-{uuid.uuid4().hex[:8]}.txt"
        put_req = bucket.presign_put(PresignPutParams(key=put_key, duration=timedelta(minutes=5)))
        resp = httpx.put(put_req.url, content=b"via presigned url")
        resp.raise_for_status()
        keys.append(put_key)
        print(f"  PUT {resp.status_code}")

        # Step 6: Presigned GET
        print("\n[6/6] Downloading through a presigned GET...")
        get_req = bucket.presign_get(PresignGetParams(key=put_key, duration=timedelta(minutes=5)))
        resp = httpx.get(get_req.url)
        resp.raise_for_status()
        print(f"  GET {resp.status_code}: {resp.content!r}")
    except (StorageError, httpx.HTTPError) as e:
        print(f"  Error: {e}")
        cleanup(bucket, keys)
        sys.exit(1)

    print("\nCleaning up...")
    cleanup(bucket, keys)

    print("\n" + "=" * 60)
    print("ALL OPERATIONS COMPLETED SUCCESSFULLY!")
    print("=" * 60)
    sys.exit(0)


if __name__ == "__main__":
    main()
