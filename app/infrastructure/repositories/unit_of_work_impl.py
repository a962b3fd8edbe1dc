"""Unit of Work implementation with async context support"""

from sqlalchemy.orm import Session

from ...domain.repositories.unit_of_work import IUnitOfWork
from .user_repository_impl import UserRepositoryImpl
from .session_repository_impl import SessionRepositoryImpl
from .password_reset_token_repository_impl import PasswordResetTokenRepositoryImpl
from .listing_repository_impl import ListingRepositoryImpl
from .inquiry_repository_impl import InquiryRepositoryImpl


class UnitOfWorkImpl(IUnitOfWork):

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepositoryImpl(session)
        self.sessions = SessionRepositoryImpl(session)
        self.reset_tokens = PasswordResetTokenRepositoryImpl(session)
        self.listings = ListingRepositoryImpl(session)
        self.inquiries = InquiryRepositoryImpl(session)
        self._committed = False

    async def __aenter__(self):
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()
        elif not self._committed:
            await self.commit()

    async def commit(self) -> None:
        """Commit transaction"""
        try:
            self.session.commit()
            self._committed = True
        except Exception:
            self.rollback_sync()
            raise

    async def rollback(self) -> None:
        """Rollback transaction"""
        self.rollback_sync()

    def rollback_sync(self) -> None:
        """Synchronous rollback helper"""
        self.session.rollback()
