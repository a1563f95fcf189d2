# Note model for user content
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User


class Note(BaseModel):
    """Personal note, always owned by exactly one user."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_favorite: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # owner reference, never reassigned
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    owner: Mapped["User"] = relationship(
        "User",
        back_populates="notes",
        doc="User who created and owns this note",
    )

    __table_args__ = (
        Index("idx_notes_owner_created", "owner_id", "created_at"),
        Index("idx_notes_owner_favorite", "owner_id", "is_favorite"),
        CheckConstraint("length(title) <= 100", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

    def toggle_favorite(self) -> bool:
        """Flip the favorite flag and return the new value."""
        self.is_favorite = not self.is_favorite
        return self.is_favorite
