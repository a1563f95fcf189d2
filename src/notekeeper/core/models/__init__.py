"""
Database models for the NoteKeeper application.

SQLAlchemy ORM models for the two persisted entities:
    - User: account with email/password credentials
    - Note: personal note owned by a single user
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
