"""Password reset token repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.password_reset_token import PasswordResetToken


class IPasswordResetTokenRepository(ABC):

    @abstractmethod
    async def add(self, token: PasswordResetToken) -> PasswordResetToken:
        pass

    @abstractmethod
    async def get_by_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        pass

    @abstractmethod
    async def update(self, token: PasswordResetToken) -> PasswordResetToken:
        pass
