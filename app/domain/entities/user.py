"""User entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..value_objects.email import Email
from ..value_objects.username import Username
from ..value_objects.entity_ids import UserId


@dataclass
class User:
    email: Email
    username: Username
    hashed_password: str
    id: Optional[UserId] = None
    is_admin: bool = False
    is_banned: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create(cls, email: Email, username: Username, hashed_password: str) -> 'User':
        """Factory method to create a new user with proper defaults"""
        now = datetime.utcnow()
        return cls(
            email=email,
            username=username,
            hashed_password=hashed_password,
            created_at=now,
            updated_at=now,
        )

    def change_password(self, hashed_password: str) -> None:
        """Business logic: replace the stored password hash"""
        self.hashed_password = hashed_password
        self.updated_at = datetime.utcnow()

    def ban(self) -> None:
        """Business logic: soft-disable the account.

        Existing session rows are left in place; they stop resolving to a
        user on the next validation.
        """
        self.is_banned = True
        self.updated_at = datetime.utcnow()

    def unban(self) -> None:
        self.is_banned = False
        self.updated_at = datetime.utcnow()

    def promote_to_admin(self) -> None:
        """Business logic: promote to admin"""
        if self.is_banned:
            raise ValueError("Cannot promote a banned user")
        self.is_admin = True
        self.updated_at = datetime.utcnow()
