"""User repository implementation"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_

from ...domain.repositories.user_repository import IUserRepository
from ...domain.entities.user import User
from ...domain.value_objects.email import Email
from ...domain.value_objects.username import Username
from ...domain.value_objects.entity_ids import UserId
from ..orm.user_model import UserModel


class UserRepositoryImpl(IUserRepository):
    """Repository implementation for User aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        model = self.session.query(UserModel).filter(UserModel.id == user_id.value).first()
        return map_user(model) if model else None

    async def get_by_email(self, email: Email) -> Optional[User]:
        """Get user by (lower-cased) email"""
        model = self.session.query(UserModel).filter(UserModel.email == str(email)).first()
        return map_user(model) if model else None

    async def get_by_username(self, username: Username) -> Optional[User]:
        model = self.session.query(UserModel).filter(UserModel.username == str(username)).first()
        return map_user(model) if model else None

    async def exists_by_email_or_username(self, email: Email, username: Username) -> bool:
        """Check if either the email or the username is taken"""
        return self.session.query(UserModel.id).filter(
            or_(UserModel.email == str(email), UserModel.username == str(username))
        ).first() is not None

    async def add(self, user: User) -> User:
        """Add a new user"""
        model = UserModel(
            email=str(user.email),
            username=str(user.username),
            password_hash=user.hashed_password,
            is_admin=user.is_admin,
            is_banned=user.is_banned,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(model)
        self.session.flush()

        user.id = UserId(model.id)
        return user

    async def update(self, user: User) -> User:
        """Update an existing user"""
        existing = self.session.query(UserModel).filter(UserModel.id == user.id.value).first()
        if existing:
            existing.email = str(user.email)
            existing.username = str(user.username)
            existing.password_hash = user.hashed_password
            existing.is_admin = user.is_admin
            existing.is_banned = user.is_banned
            existing.updated_at = user.updated_at
            self.session.flush()
        return user


def map_user(model: UserModel) -> User:
    """Map ORM model to domain entity"""
    return User(
        id=UserId(model.id),
        email=Email(model.email),
        username=Username(model.username),
        hashed_password=model.password_hash,
        is_admin=model.is_admin,
        is_banned=model.is_banned,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
