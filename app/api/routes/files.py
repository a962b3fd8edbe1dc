"""File upload routes"""

from fastapi import APIRouter, Depends, File, UploadFile

from ...api.dependencies import get_current_user, get_storage_service
from ...application.dtos.listing_dtos import UploadResponse
from ...application.use_cases.file_use_cases import UploadListingImageUseCase
from ...core.config import settings
from ...domain.entities.user import User
from ...infrastructure.external_services.storage_service import StorageService

router = APIRouter()


async def read_upload(file: UploadFile) -> bytes:
    """Read one byte past the size limit at most; the use case rejects anything longer"""
    return await file.read(settings.MAX_UPLOAD_SIZE + 1)


@router.post("/upload", response_model=UploadResponse)
async def upload_image(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
    storage_service: StorageService = Depends(get_storage_service),
):
    """Upload a single listing image"""
    file_data = await read_upload(file)
    url = await UploadListingImageUseCase(storage_service).execute(
        current_user, file_data, file.content_type or ""
    )
    return UploadResponse(url=url)
