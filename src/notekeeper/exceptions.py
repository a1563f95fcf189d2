"""
Application exception hierarchy.

Services raise these; the handlers registered in ``main.create_app`` turn
them into ``{"message": ...}`` JSON responses with the matching status code.

    NoteKeeperError (500)
    ├── ValidationError   -> 400
    ├── AuthError         -> 401
    ├── NotFoundError     -> 404
    ├── ConflictError     -> 400
    └── ServerError       -> 500
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """Base class for all application errors.

    ``message`` is safe to show to API clients; ``context`` is only logged.
    """

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteKeeperError):
    """Client input failed validation."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message, ctx)
        self.field = field


class AuthError(NoteKeeperError):
    """Missing, malformed, invalid or expired credentials."""

    status_code = 401
    default_message = "Not authorized"


class NotFoundError(NoteKeeperError):
    """Resource is absent, or not owned by the requester."""

    status_code = 404

    def __init__(self, resource: str = "Resource", context: Optional[Dict[str, Any]] = None):
        super().__init__(f"{resource} not found", context)
        self.resource = resource


class ConflictError(NoteKeeperError):
    """Unique value already taken (e.g. a registered email)."""

    status_code = 400
    default_message = "Already exists"


class ServerError(NoteKeeperError):
    """Unexpected persistence or infrastructure fault."""

    status_code = 500
