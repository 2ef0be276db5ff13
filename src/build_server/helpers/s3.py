"""S3 helper functions."""

import mimetypes
from typing import Optional

from . import boto3_client

DEFAULT_CONTENT_TYPE = "application/octet-stream"
OUTPUTS_PREFIX = "__outputs"


def guess_content_type(file_name: str) -> str:
    """Infer the content type from the file extension."""
    content_type, _ = mimetypes.guess_type(file_name)
    return content_type or DEFAULT_CONTENT_TYPE


def output_key_prefix(project_id: str) -> str:
    """Key prefix under which a project's build outputs live."""
    return f"{OUTPUTS_PREFIX}/{project_id}"


def build_object_key(key_prefix: str, file_name: str) -> str:
    """Join a key prefix and a file name into an S3 object key."""
    return f"{key_prefix.rstrip('/')}/{file_name}"


def upload_file(
    s3_client,
    local_file_path: str,
    bucket_name: str,
    s3_key: str,
    content_type: str = DEFAULT_CONTENT_TYPE,
) -> None:
    """Upload a file to S3 with an explicit content type. Errors propagate."""
    s3_client.upload_file(
        local_file_path,
        bucket_name,
        s3_key,
        ExtraArgs={"ContentType": content_type},
    )


def create_s3_client(
    region: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
):
    """Create S3 client for the region and optional static credentials."""
    return boto3_client.create_client(
        "s3", region, access_key_id, secret_access_key
    )
