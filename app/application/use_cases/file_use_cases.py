"""File upload use cases"""

import logging
import time

from ...core.config import settings
from ...core.exceptions import ValidationError
from ...domain.entities.user import User
from ...infrastructure.external_services.storage_service import StorageService

logger = logging.getLogger(__name__)

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


class UploadListingImageUseCase:

    def __init__(self, storage_service: StorageService):
        self.storage_service = storage_service

    async def execute(self, owner: User, file_data: bytes, content_type: str) -> str:
        """Store one listing image and return its public URL"""
        if content_type not in settings.ALLOWED_IMAGE_TYPES:
            raise ValidationError("Only JPEG, PNG, WebP and GIF images are allowed.")
        if not file_data:
            raise ValidationError("No file provided.")
        if len(file_data) > settings.MAX_UPLOAD_SIZE:
            raise ValidationError(
                f"File too large (max {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB)."
            )

        extension = EXTENSIONS.get(content_type, "bin")
        object_name = f"listings/{owner.id.value}/{int(time.time() * 1000)}.{extension}"
        url = await self.storage_service.upload_file(file_data, object_name, content_type)

        logger.info("User %s uploaded %s (%d bytes)", owner.id.value, object_name, len(file_data))
        return url
