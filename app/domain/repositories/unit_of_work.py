"""Unit of Work interface for transaction management"""

from abc import ABC, abstractmethod

from .user_repository import IUserRepository
from .session_repository import ISessionRepository
from .password_reset_token_repository import IPasswordResetTokenRepository
from .listing_repository import IListingRepository
from .inquiry_repository import IInquiryRepository


class IUnitOfWork(ABC):
    """Unit of Work interface for managing transactions across repositories"""

    users: IUserRepository
    sessions: ISessionRepository
    reset_tokens: IPasswordResetTokenRepository
    listings: IListingRepository
    inquiries: IInquiryRepository

    @abstractmethod
    async def __aenter__(self):
        """Enter async context"""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context"""
        pass

    @abstractmethod
    async def commit(self):
        """Commit transaction"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass
