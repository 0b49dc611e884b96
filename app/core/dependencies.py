"""Shared FastAPI dependencies."""
from fastapi import Request

from .config import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with (see create_app)."""
    return request.app.state.settings
