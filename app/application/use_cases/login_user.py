"""Login user use case"""

from ...core.exceptions import AuthError
from ...core.security import DUMMY_PASSWORD_HASH, verify_password
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import LoginUserDto
from ..services.session_service import SessionService, IssuedSession

INVALID_CREDENTIALS = "Invalid email or password."


class LoginUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work
        self.sessions = SessionService(unit_of_work)

    async def execute(self, request: LoginUserDto) -> IssuedSession:
        if not request.email or not request.password:
            raise AuthError(INVALID_CREDENTIALS)

        try:
            email = Email(request.email)
        except ValueError:
            raise AuthError(INVALID_CREDENTIALS)

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(email)

        # Unknown, banned and wrong-password all look the same to the caller
        if not user or user.is_banned:
            verify_password(request.password, DUMMY_PASSWORD_HASH)
            raise AuthError(INVALID_CREDENTIALS)
        if not verify_password(request.password, user.hashed_password):
            raise AuthError(INVALID_CREDENTIALS)

        return await self.sessions.start(user)
