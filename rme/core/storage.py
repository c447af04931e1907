"""S3-compatible object storage for uploaded file bytes."""

from __future__ import annotations

import asyncio
import os
import uuid
from datetime import datetime

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError


class ObjectStorageError(Exception):
    """Raised when an upload or delete against the bucket fails."""


def generate_object_key(filename: str, now: datetime | None = None) -> str:
    """Return ``files/<YYYYmmdd_HHMMSS>_<8 hex>_<filename>``.

    The random segment keeps two uploads of the same name in the same second
    from overwriting each other.
    """
    now = now or datetime.now()
    return f"files/{now.strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}_{filename}"


class ObjectStorage:
    """Thin async wrapper over a boto3 S3 client.

    boto3 is blocking, so every call is pushed to a worker thread.
    """

    def __init__(
        self,
        bucket: str,
        *,
        endpoint_url: str | None = None,
        region: str = "us-east-1",
        path_style: bool = False,
        client=None,
    ) -> None:
        self.bucket = bucket
        self.endpoint_url = endpoint_url
        self.path_style = path_style
        if client is None:
            client = boto3.client(
                "s3",
                region_name=region,
                endpoint_url=endpoint_url,
                config=Config(s3={"addressing_style": "path" if path_style else "auto"}),
            )
        self._client = client

    @classmethod
    def from_env(cls) -> ObjectStorage:
        """Build from AWS_* environment variables (credentials are read by boto3)."""
        return cls(
            os.environ.get("AWS_BUCKET", "rme-files"),
            endpoint_url=os.environ.get("AWS_ENDPOINT") or None,
            region=os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
            path_style=os.environ.get("AWS_USE_PATH_STYLE_ENDPOINT", "false").lower() == "true",
        )

    def object_url(self, key: str) -> str:
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.amazonaws.com/{key}"

    async def upload(self, key: str, body: bytes, content_type: str) -> str:
        """Store *body* under *key* and return its public URL."""
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise ObjectStorageError(f"Failed to upload to S3: {exc}") from exc
        return self.object_url(key)

    async def delete(self, key: str) -> None:
        try:
            await asyncio.to_thread(self._client.delete_object, Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            raise ObjectStorageError(f"Failed to delete from S3: {exc}") from exc
