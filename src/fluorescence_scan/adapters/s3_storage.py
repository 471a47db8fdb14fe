"""S3 object storage client construction."""

from dataclasses import dataclass

import boto3
from botocore.client import BaseClient
from botocore.config import Config

from fluorescence_scan.config import Settings


@dataclass(frozen=True)
class S3Bucket:
    """S3 bucket where scan files are stored."""

    name: str


def create_s3_client(settings: Settings) -> BaseClient:
    """Create an S3 client from the configured endpoint and credentials."""
    addressing_style = "path" if settings.s3_force_path_style else "auto"
    return boto3.client(
        "s3",
        endpoint_url=settings.s3_endpoint_url,
        aws_access_key_id=settings.s3_access_key_id or "",
        aws_secret_access_key=settings.s3_secret_access_key or "",
        region_name=settings.s3_region or "undefined",
        config=Config(s3={"addressing_style": addressing_style}),
    )
