"""Server-side session lifecycle.

A login creates a row in the sessions table and hands the client a signed
token that carries only the session id. The row is the source of truth:
a token is worthless once its row is gone, expired, or owned by a banned
account.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ...core.config import settings
from ...core.security import generate_session_id, create_session_token, decode_session_token
from ...domain.entities.session import Session
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedSession:
    token: str
    expires_at: datetime


@dataclass(frozen=True)
class AuthenticatedSession:
    user: User
    session_id: str


class SessionService:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def start(self, user: User) -> IssuedSession:
        """Persist a new session for user and sign a token for it"""
        session = Session.start(
            session_id=generate_session_id(),
            user_id=user.id,
            duration=timedelta(days=settings.SESSION_DURATION_DAYS),
        )
        async with self.unit_of_work:
            await self.unit_of_work.sessions.add(session)
            await self.unit_of_work.commit()

        logger.info("Session started for user %s", user.id.value)
        return IssuedSession(
            token=create_session_token(session.id, session.expires_at),
            expires_at=session.expires_at,
        )

    async def resolve(self, token: Optional[str]) -> Optional[AuthenticatedSession]:
        """Map a client token to its user; None means anonymous, never raises
        for bad tokens."""
        if not token:
            return None

        session_id = decode_session_token(token)
        if not session_id:
            return None

        async with self.unit_of_work:
            found = await self.unit_of_work.sessions.get_with_user(session_id)
            if not found:
                return None
            session, user = found

            if session.is_expired():
                # Lazy expiry, there is no background sweep
                await self.unit_of_work.sessions.delete(session_id)
                await self.unit_of_work.commit()
                return None

        # Banned accounts keep their rows; only the effect is revoked
        if user.is_banned:
            return None

        return AuthenticatedSession(user=user, session_id=session_id)

    async def end(self, token: Optional[str]) -> None:
        """Best-effort logout: delete the row if the token still decodes"""
        if not token:
            return
        session_id = decode_session_token(token)
        if not session_id:
            return
        async with self.unit_of_work:
            await self.unit_of_work.sessions.delete(session_id)
            await self.unit_of_work.commit()
