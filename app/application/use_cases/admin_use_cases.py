"""Admin use cases"""

import logging

from ...core.exceptions import NotFoundError
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId

logger = logging.getLogger(__name__)


class SetUserBanUseCase:
    """Ban or unban an account. Existing sessions stop resolving immediately
    but their rows are left in place."""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, admin: User, user_id: int, banned: bool) -> User:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(UserId(user_id))
            if not user:
                raise NotFoundError("User not found.")

            if banned:
                user.ban()
            else:
                user.unban()
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("Admin %s set banned=%s for user %s", admin.id.value, banned, user_id)
        return user
