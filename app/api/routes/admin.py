"""Admin routes"""

from fastapi import APIRouter, Depends, Path

from ...api.dependencies import get_current_admin_user, get_unit_of_work
from ...application.dtos.user_dtos import BanUserDto, OkResponse
from ...application.use_cases.admin_use_cases import SetUserBanUseCase
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import MAX_ENTITY_ID

router = APIRouter()


@router.put("/users/{user_id}/ban", response_model=OkResponse)
async def set_user_ban(
    request: BanUserDto,
    user_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    admin_user: User = Depends(get_current_admin_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Ban or unban a user"""
    await SetUserBanUseCase(unit_of_work).execute(admin_user, user_id, request.banned)
    return OkResponse()
