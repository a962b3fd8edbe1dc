"""User repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user import User
from ..value_objects.email import Email
from ..value_objects.username import Username
from ..value_objects.entity_ids import UserId


class IUserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: Email) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: Username) -> Optional[User]:
        pass

    @abstractmethod
    async def exists_by_email_or_username(self, email: Email, username: Username) -> bool:
        """Single combined check; callers cannot tell which field collided"""
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass
