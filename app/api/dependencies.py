"""API dependencies for DDD architecture"""

from datetime import datetime
from typing import Optional

import redis
from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import AuthError
from ..db.database import get_db
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..domain.entities.user import User
from ..application.services.session_service import SessionService, AuthenticatedSession
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from ..infrastructure.external_services.storage_service import StorageService
from ..infrastructure.external_services.email_service import EmailService
from ..infrastructure.external_services.page_fetcher import PageFetcher
from ..infrastructure.external_services.rate_limiter import (
    IRateLimiter,
    InMemoryRateLimiter,
    RedisRateLimiter,
)


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(db)


def get_storage_service() -> StorageService:
    """Get storage service"""
    return StorageService()


def get_email_service() -> EmailService:
    """Get email service"""
    return EmailService()


def get_page_fetcher() -> PageFetcher:
    return PageFetcher()


def _build_rate_limiter() -> IRateLimiter:
    if settings.RATE_LIMIT_BACKEND == "redis":
        return RedisRateLimiter(
            redis.from_url(settings.REDIS_URL),
            limit=settings.INQUIRY_RATE_LIMIT,
            window_seconds=settings.INQUIRY_RATE_WINDOW_SECONDS,
        )
    return InMemoryRateLimiter(
        limit=settings.INQUIRY_RATE_LIMIT,
        window_seconds=settings.INQUIRY_RATE_WINDOW_SECONDS,
    )


# Counters must outlive a single request
inquiry_rate_limiter = _build_rate_limiter()


def get_rate_limiter() -> IRateLimiter:
    return inquiry_rate_limiter


def get_client_ip(request: Request) -> str:
    """First X-Forwarded-For hop, else the peer address"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def get_optional_session(
    token: Optional[str] = Depends(get_session_token),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
) -> Optional[AuthenticatedSession]:
    """Resolve the session cookie; None for anonymous callers"""
    return await SessionService(unit_of_work).resolve(token)


async def get_optional_user(
    session: Optional[AuthenticatedSession] = Depends(get_optional_session),
) -> Optional[User]:
    return session.user if session else None


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Get current authenticated user"""
    if not user:
        raise AuthError()
    return user


async def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """Get current admin user"""
    if not current_user.is_admin:
        # Non-admins are not told the route exists
        raise AuthError()
    return current_user


def set_session_cookie(response: Response, token: str, expires_at: datetime) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
        path="/",
        max_age=int((expires_at - datetime.utcnow()).total_seconds()),
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
        path="/",
    )
