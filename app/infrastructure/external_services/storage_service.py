"""Storage service using MinIO"""

import logging
from io import BytesIO

from minio import Minio
from minio.error import S3Error

from ...core.config import settings
from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class StorageService:

    def __init__(self):
        if not settings.storage_enabled:
            raise ConfigurationError("File storage is not configured.")

        self.client = Minio(
            endpoint=settings.MINIO_ENDPOINT,
            access_key=settings.MINIO_ACCESS_KEY,
            secret_key=settings.MINIO_SECRET_KEY,
            secure=settings.MINIO_SECURE
        )
        self.bucket = settings.MINIO_BUCKET_NAME
        self._ensure_bucket_exists()

    def _ensure_bucket_exists(self):
        """Ensure bucket exists"""
        try:
            if not self.client.bucket_exists(self.bucket):
                self.client.make_bucket(self.bucket)
        except S3Error as e:
            # Another instance may have created it first
            logger.warning("Could not ensure bucket %s exists: %s", self.bucket, e)

    async def upload_file(self, file_data: bytes, object_name: str, content_type: str) -> str:
        """Upload file and return its public URL"""
        self.client.put_object(
            bucket_name=self.bucket,
            object_name=object_name,
            data=BytesIO(file_data),
            length=len(file_data),
            content_type=content_type
        )

        protocol = "https" if settings.MINIO_SECURE else "http"
        return f"{protocol}://{settings.MINIO_ENDPOINT}/{self.bucket}/{object_name}"
