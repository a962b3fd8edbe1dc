"""Declarative base shared by the ORM models"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# All model classes live in infrastructure/orm/ so that domain code never
# imports SQLAlchemy. Nothing is imported here to avoid circular imports.
