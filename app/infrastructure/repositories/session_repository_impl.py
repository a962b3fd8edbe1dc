"""Session repository implementation"""

from typing import Optional, Tuple
from sqlalchemy.orm import Session as DbSession

from ...domain.repositories.session_repository import ISessionRepository
from ...domain.entities.session import Session
from ...domain.entities.user import User
from ...domain.value_objects.entity_ids import UserId
from ..orm.session_model import SessionModel
from ..orm.user_model import UserModel
from .user_repository_impl import map_user


class SessionRepositoryImpl(ISessionRepository):

    def __init__(self, session: DbSession):
        self.session = session

    async def add(self, login_session: Session) -> Session:
        model = SessionModel(
            id=login_session.id,
            user_id=login_session.user_id.value,
            expires_at=login_session.expires_at,
            created_at=login_session.created_at,
        )
        self.session.add(model)
        self.session.flush()
        return login_session

    async def get_with_user(self, session_id: str) -> Optional[Tuple[Session, User]]:
        row = (
            self.session.query(SessionModel, UserModel)
            .join(UserModel, SessionModel.user_id == UserModel.id)
            .filter(SessionModel.id == session_id)
            .first()
        )
        if not row:
            return None
        session_model, user_model = row
        return (
            Session(
                id=session_model.id,
                user_id=UserId(session_model.user_id),
                expires_at=session_model.expires_at,
                created_at=session_model.created_at,
            ),
            map_user(user_model),
        )

    async def delete(self, session_id: str) -> None:
        self.session.query(SessionModel).filter(SessionModel.id == session_id).delete(
            synchronize_session=False
        )
