"""Password reset token repository implementation"""

from typing import Optional
from sqlalchemy.orm import Session

from ...domain.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from ...domain.entities.password_reset_token import PasswordResetToken
from ...domain.value_objects.entity_ids import UserId
from ..orm.password_reset_token_model import PasswordResetTokenORM


class PasswordResetTokenRepositoryImpl(IPasswordResetTokenRepository):

    def __init__(self, session: Session):
        self.session = session

    async def add(self, token: PasswordResetToken) -> PasswordResetToken:
        model = PasswordResetTokenORM(
            user_id=token.user_id.value,
            token_hash=token.token_hash,
            expires_at=token.expires_at,
            used_at=token.used_at,
            created_at=token.created_at,
        )
        self.session.add(model)
        self.session.flush()
        token.id = model.id
        return token

    async def get_by_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        model = self.session.query(PasswordResetTokenORM).filter(
            PasswordResetTokenORM.token_hash == token_hash
        ).first()
        return self._map_to_entity(model) if model else None

    async def update(self, token: PasswordResetToken) -> PasswordResetToken:
        existing = self.session.query(PasswordResetTokenORM).filter(
            PasswordResetTokenORM.id == token.id
        ).first()
        if existing:
            existing.used_at = token.used_at
            existing.expires_at = token.expires_at
            self.session.flush()
        return token

    def _map_to_entity(self, model: PasswordResetTokenORM) -> PasswordResetToken:
        return PasswordResetToken(
            id=model.id,
            user_id=UserId(model.user_id),
            token_hash=model.token_hash,
            expires_at=model.expires_at,
            used_at=model.used_at,
            created_at=model.created_at,
        )
