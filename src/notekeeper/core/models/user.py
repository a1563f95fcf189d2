"""
User model for authentication.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .note import Note


class User(BaseModel):
    """User account identified by a unique, lower-cased email."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    # always stored lower-cased so the unique index is case-insensitive
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    notes: Mapped[List["Note"]] = relationship(
        "Note",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("length(name) <= 50", name="ck_users_name_len"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"
