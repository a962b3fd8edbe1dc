"""Session repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..entities.session import Session
from ..entities.user import User


class ISessionRepository(ABC):

    @abstractmethod
    async def add(self, session: Session) -> Session:
        pass

    @abstractmethod
    async def get_with_user(self, session_id: str) -> Optional[Tuple[Session, User]]:
        """Session joined with its owning account"""
        pass

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        pass
