"""
Base SQLAlchemy configuration.

This module defines the declarative base and the abstract model every
listable resource inherits from.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, MetaData, false, func
from sqlalchemy.orm import declarative_base

# Define a consistent naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

Base = declarative_base(metadata=metadata)


class BaseModel(Base):
    """Base model with id, timestamps and the soft-delete flag."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True)
    is_deleted = Column(Boolean, default=False, server_default=false(), nullable=False)
    created_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=func.now(), onupdate=func.now(), nullable=False
    )


__all__ = ["Base", "BaseModel", "metadata"]
