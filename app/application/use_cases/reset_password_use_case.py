"""Reset password use case"""

import logging

from ...core.exceptions import ValidationError
from ...core.security import get_password_hash, hash_reset_token
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.user_dtos import ResetPasswordDto
from .register_user import validate_new_password

logger = logging.getLogger(__name__)

INVALID_LINK = "Link is invalid or has expired."


class ResetPasswordUseCase:
    """Use case for resetting password with a one-time token"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: ResetPasswordDto) -> None:
        if not request.token:
            raise ValidationError(INVALID_LINK)
        validate_new_password(request.new_pw)

        async with self.unit_of_work:
            token = await self.unit_of_work.reset_tokens.get_by_hash(hash_reset_token(request.token))
            if not token or not token.is_valid():
                raise ValidationError(INVALID_LINK)

            user = await self.unit_of_work.users.get_by_id(token.user_id)
            if not user:
                raise ValidationError(INVALID_LINK)

            user.change_password(get_password_hash(request.new_pw))
            await self.unit_of_work.users.update(user)

            # Kept for audit, never deleted
            token.mark_used()
            await self.unit_of_work.reset_tokens.update(token)
            await self.unit_of_work.commit()

        logger.info("Password reset completed for user %s", user.id.value)
