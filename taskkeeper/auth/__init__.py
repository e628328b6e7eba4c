"""
Taskkeeper API - Authentication Module

Sign-up/sign-in with JWT authentication.
"""

from taskkeeper.auth.router import router as auth_router
from taskkeeper.auth.dependencies import get_current_user

__all__ = ["auth_router", "get_current_user"]
