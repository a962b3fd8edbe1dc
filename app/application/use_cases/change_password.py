"""Change password use case"""

import logging

from ...core.exceptions import AuthError, IncorrectPasswordError
from ...core.security import get_password_hash, verify_password
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import ChangePasswordDto
from .register_user import validate_new_password

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """Other sessions of the same account stay valid after a change."""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, current_user: User, request: ChangePasswordDto) -> None:
        validate_new_password(request.new_pw)

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(current_user.id)
            if not user:
                raise AuthError()

            if not verify_password(request.current_pw, user.hashed_password):
                raise IncorrectPasswordError()

            user.change_password(get_password_hash(request.new_pw))
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("Password changed for user %s", user.id.value)
