"""Centralized boto3 client creation helper."""
import boto3
from typing import Optional


def create_client(
    service_name: str,
    region: Optional[str] = None,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
):
    """Create a boto3 client for the given region and optional static credentials."""

    # Require explicit region - no fallback
    if not region:
        raise ValueError(f"Region must be provided to create a {service_name} client")

    kwargs = {"region_name": region}

    # Static credentials only when both halves are present, otherwise boto3
    # resolves credentials through its default provider chain.
    if access_key_id and secret_access_key:
        kwargs["aws_access_key_id"] = access_key_id
        kwargs["aws_secret_access_key"] = secret_access_key

    return boto3.client(service_name, **kwargs)
