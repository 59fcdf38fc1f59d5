"""
User Model
Members, leads and board members
"""

from sqlalchemy import Column, String, Boolean, DateTime
from clubify.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # member | lead | board
    role = Column(String(20), nullable=False, default="member", index=True)

    # Status
    is_active = Column(Boolean, default=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
