# src/storage/s3_writer.py - v2
"""S3-compatible output writer (OUTPUT_WRITER=s3).

Publishes generated icons straight to AWS S3, MinIO or other S3-compatible
storage. Requires 'boto3' package: pip install boto3.
"""

from __future__ import annotations

import logging

from faviconcache.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)

_CONTENT_TYPES: dict[str, str] = {
    ".png": "image/png",
    ".ico": "image/x-icon",
    ".svg": "image/svg+xml",
    ".json": "application/json",
    ".webmanifest": "application/manifest+json",
    ".xml": "application/xml",
    ".html": "text/html",
    ".cache": "application/json",
}


class S3Writer(BaseOutputWriter):
    """Write build outputs to S3-compatible object storage."""

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        region: str | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        """Initialize S3 writer.

        Args:
            bucket: S3 bucket name.
            prefix: Key prefix for all objects (e.g. "static/").
            region: AWS region (optional, uses boto3 default if not set).
            endpoint_url: Custom endpoint for MinIO/compatible storage.
        """
        try:
            import boto3
        except ImportError as e:
            raise ImportError(
                "boto3 package required for S3 writer: pip install boto3"
            ) from e

        kwargs: dict = {}
        if region:
            kwargs["region_name"] = region
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url

        self._s3 = boto3.client("s3", **kwargs)
        self._bucket = bucket
        self._prefix = prefix.rstrip("/") + "/" if prefix else ""

    def _full_key(self, path: str) -> str:
        """Build the full S3 key from a relative path."""
        return f"{self._prefix}{path}"

    async def write(self, path: str, content: bytes | str) -> None:
        """Write content to S3."""
        key = self._full_key(path)
        if isinstance(content, str):
            body = content.encode("utf-8")
        else:
            body = content
        self._s3.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=_guess_content_type(path),
        )
        logger.debug("S3 write: s3://%s/%s (%d bytes)", self._bucket, key, len(body))

    async def read(self, path: str) -> bytes:
        """Read content from S3."""
        key = self._full_key(path)
        response = self._s3.get_object(Bucket=self._bucket, Key=key)
        return response["Body"].read()

    async def exists(self, path: str) -> bool:
        """Check if an S3 object exists."""
        key = self._full_key(path)
        try:
            self._s3.head_object(Bucket=self._bucket, Key=key)
            return True
        except self._s3.exceptions.ClientError:
            return False


def _guess_content_type(path: str) -> str:
    dot = path.rfind(".")
    if dot == -1:
        return "application/octet-stream"
    return _CONTENT_TYPES.get(path[dot:].lower(), "application/octet-stream")
