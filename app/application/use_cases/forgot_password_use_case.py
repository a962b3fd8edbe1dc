"""Forgot password use case"""

import logging
from datetime import timedelta

from ...core.config import settings
from ...core.security import generate_reset_token, hash_reset_token
from ...domain.entities.password_reset_token import PasswordResetToken
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ..dtos.user_dtos import ForgotPasswordDto

logger = logging.getLogger(__name__)


class ForgotPasswordUseCase:
    """Issue a reset link. The caller always reports success, whether or not
    the address belongs to an account."""

    def __init__(self, unit_of_work: IUnitOfWork, email_service: EmailService):
        self.unit_of_work = unit_of_work
        self.email_service = email_service

    async def execute(self, request: ForgotPasswordDto) -> None:
        if not request.email:
            return
        try:
            email = Email(request.email)
        except ValueError:
            return

        if not self.email_service.enabled:
            logger.info("Password reset requested but email delivery is not configured")
            return

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(email)
            if not user:
                return

            raw_token = generate_reset_token()
            token = PasswordResetToken.issue(
                user_id=user.id,
                token_hash=hash_reset_token(raw_token),
                expires_in=timedelta(minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES),
            )
            await self.unit_of_work.reset_tokens.add(token)
            await self.unit_of_work.commit()

        reset_url = f"{settings.FRONTEND_URL.rstrip('/')}/reset/{raw_token}"
        # Token is already stored; a failed send is logged, never surfaced
        sent = await self.email_service.send_password_reset_email(email=str(user.email), reset_url=reset_url)
        if not sent:
            logger.warning("Password reset email for user %s was not delivered", user.id.value)
