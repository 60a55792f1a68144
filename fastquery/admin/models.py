"""
Admin SQLAlchemy model.
"""

from sqlalchemy import Column, String

from fastquery.db.base import BaseModel


class Admin(BaseModel):
    """Administrator account listed by the admin endpoint."""

    __tablename__ = "admins"

    name = Column(String(120), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    contact_number = Column(String(32), nullable=True)
    role = Column(String(32), nullable=False, default="admin")
