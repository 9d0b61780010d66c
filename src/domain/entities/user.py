"""
User Entity

Represents a person who can belong to multiple projects.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a person who can be a member of many projects.

    Business Rules:
    - Email must be unique across all users
    - Invited users that never signed up exist as placeholders
      (no password_hash, name derived from the email local part)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    password_hash: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    @property
    def is_placeholder(self) -> bool:
        return self.password_hash is None

    @property
    def display_name(self) -> str:
        return self.name or self.email.split("@")[0]
