"""Session ORM Model"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class SessionModel(Base):
    __tablename__ = 'sessions'

    id = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    user = relationship('UserModel', back_populates='sessions')

    def __repr__(self):
        return f"<SessionModel(id={self.id[:8]}..., user_id={self.user_id}, expires_at={self.expires_at})>"
