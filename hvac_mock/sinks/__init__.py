# hvac_mock/sinks/__init__.py
"""
Output sinks for generated telemetry.

- json_writer: JSON array / JSON lines serialisation and local files
- s3_uploader: upload to S3-compatible object storage
"""

from hvac_mock.sinks.json_writer import (
    default_object_name,
    save_locally,
    to_json,
    to_jsonl,
    write_jsonl,
)
from hvac_mock.sinks.s3_uploader import create_s3_client, upload_to_s3

__all__ = [
    "default_object_name",
    "save_locally",
    "to_json",
    "to_jsonl",
    "write_jsonl",
    "create_s3_client",
    "upload_to_s3",
]
