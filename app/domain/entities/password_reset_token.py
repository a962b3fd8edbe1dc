"""Password reset token entity"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from ..value_objects.entity_ids import UserId


@dataclass
class PasswordResetToken:
    user_id: UserId
    token_hash: str
    expires_at: datetime
    id: Optional[int] = None
    used_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def issue(cls, user_id: UserId, token_hash: str, expires_in: timedelta) -> 'PasswordResetToken':
        """Only the hash of the secret is ever kept"""
        now = datetime.utcnow()
        return cls(user_id=user_id, token_hash=token_hash, expires_at=now + expires_in, created_at=now)

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        """Business logic: unused and not yet expired"""
        if self.used_at is not None:
            return False
        return (now or datetime.utcnow()) < self.expires_at

    def mark_used(self) -> None:
        """Business logic: consume the token. The row is kept for audit."""
        if self.used_at is not None:
            raise ValueError("Reset token already used")
        self.used_at = datetime.utcnow()
