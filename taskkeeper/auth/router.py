"""
Taskkeeper API - Authentication Router

Endpoints for user sign-up and sign-in.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskkeeper.auth.dependencies import get_auth_service
from taskkeeper.auth.schemas import (
    AuthCredentialsRequest,
    MessageResponse,
    SignInRequest,
    TokenResponse,
)
from taskkeeper.auth.service import AuthService


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up a new user",
)
async def sign_up(
    request: AuthCredentialsRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """
    Register a new user with username and password.

    - Username must be 4-20 characters
    - Password must be 8-20 characters with upper-case, lower-case,
      and a digit or special character

    Returns 409 if the username is already taken.
    """
    await auth_service.sign_up(request)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/signin",
    response_model=TokenResponse,
    summary="Sign in and get access token",
)
async def sign_in(
    request: SignInRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """
    Authenticate user and return a JWT access token.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <token>`
    """
    return await auth_service.sign_in(request)
