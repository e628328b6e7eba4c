"""
Taskkeeper API - Authentication Schemas

Pydantic models for authentication requests and responses.
"""

import re

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Upper-case, lower-case, and a digit or non-word character
PASSWORD_STRENGTH = re.compile(r"((?=.*\d)|(?=.*\W+))(?![.\n])(?=.*[A-Z])(?=.*[a-z]).*$")


class AuthCredentialsRequest(BaseModel):
    """Request schema for sign-up."""

    username: str = Field(..., min_length=4, max_length=20)
    password: str = Field(..., min_length=8, max_length=20)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not PASSWORD_STRENGTH.search(value):
            raise ValueError("password too weak")
        return value


class SignInRequest(BaseModel):
    """Request schema for sign-in. Any mismatch is reported as invalid credentials."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Response schema for successful sign-in."""

    access_token: str = Field(
        validation_alias=AliasChoices("access_token", "accessToken"),
        serialization_alias="accessToken",
    )


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str
