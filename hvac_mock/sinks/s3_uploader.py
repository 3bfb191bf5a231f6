# hvac_mock/sinks/s3_uploader.py
"""
Upload of serialised telemetry to an S3-compatible bucket.

Credentials are resolved by boto3's default chain (environment variables,
shared credentials file, instance profile). ``endpoint_url`` points the
client at S3-compatible storage such as LocalStack or MinIO.
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)

__all__ = ["create_s3_client", "upload_to_s3"]


def create_s3_client(region: str | None = None, endpoint_url: str | None = None) -> Any:
    """Create a boto3 S3 client; empty strings are treated as unset."""
    return boto3.client(
        "s3",
        region_name=region or None,
        endpoint_url=endpoint_url or None,
    )


def upload_to_s3(
    bucket_name: str,
    region: str | None,
    data: bytes,
    key: str,
    endpoint_url: str | None = None,
    content_type: str = "application/json",
    client: Any | None = None,
) -> str:
    """Upload a serialised payload as a single object.

    Args:
        bucket_name: Target bucket
        region: AWS region (None = boto3 default)
        data: Object body
        key: Object key
        endpoint_url: Custom endpoint for S3-compatible storage
        content_type: Content-Type stored with the object
        client: Pre-built S3 client (created from region/endpoint if None)

    Returns:
        ``s3://bucket/key`` URI of the uploaded object

    Raises:
        ValueError: If bucket name or key is empty
        RuntimeError: If the upload fails
    """
    if not bucket_name:
        raise ValueError("bucket_name cannot be empty (set S3_BUCKET_NAME)")
    if not key:
        raise ValueError("key cannot be empty")

    logger.info(
        f"Uploading '{key}' to S3 bucket '{bucket_name}' "
        f"(region={region or 'default'}, endpoint={endpoint_url or 'AWS'})"
    )

    try:
        s3 = client or create_s3_client(region, endpoint_url)
        s3.put_object(
            Bucket=bucket_name,
            Key=key,
            Body=data,
            ContentType=content_type,
        )
    except (BotoCoreError, ClientError) as e:
        raise RuntimeError(
            f"Failed to upload '{key}' to S3 bucket '{bucket_name}': {e}"
        ) from e

    uri = f"s3://{bucket_name}/{key}"
    logger.info(f"Upload of '{key}' to S3 completed: {uri}")
    return uri
