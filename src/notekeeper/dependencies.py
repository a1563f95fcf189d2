"""Request-scoped FastAPI dependencies shared by routers and middleware."""

from fastapi import Request

from .config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings
