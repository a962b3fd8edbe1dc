"""Register user use case"""

import logging

from ...core.exceptions import ConflictError, ValidationError
from ...core.security import get_password_hash
from ...domain.entities.user import User
from ...domain.value_objects.email import Email
from ...domain.value_objects.username import Username
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import CreateUserDto
from ..services.session_service import SessionService, IssuedSession

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def validate_new_password(password: str) -> None:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")


class RegisterUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work
        self.sessions = SessionService(unit_of_work)

    async def execute(self, request: CreateUserDto) -> IssuedSession:
        """Create the account and log it in"""
        validate_new_password(request.password)
        try:
            username = Username(request.username)
            email = Email(request.email)
        except ValueError as e:
            raise ValidationError(str(e))

        async with self.unit_of_work:
            # One combined check, the message does not say which field collided
            if await self.unit_of_work.users.exists_by_email_or_username(email, username):
                raise ConflictError("Email or username already taken.")

            user = User.create(
                email=email,
                username=username,
                hashed_password=get_password_hash(request.password),
            )
            user = await self.unit_of_work.users.add(user)
            await self.unit_of_work.commit()

        logger.info("Registered user %s", user.id.value)
        return await self.sessions.start(user)
