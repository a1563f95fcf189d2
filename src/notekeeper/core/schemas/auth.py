"""
Authentication schemas.

These schemas define the API contracts for registration, login and the
identity returned alongside issued tokens.
"""

import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    """User registration request schema."""

    name: str = Field(min_length=1, max_length=50, description="Display name")
    email: EmailStr = Field(description="Unique email address")
    password: str = Field(min_length=6, max_length=128, description="User password")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Emails are compared case-insensitively."""
        return v.lower()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "password": "s3cretpass",
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: EmailStr = Field(description="Registered email address")
    password: str = Field(min_length=1, max_length=128, description="User password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "jane@example.com", "password": "s3cretpass"}
        }
    )


class UserResponse(BaseModel):
    """Public user information. Never carries the password hash."""

    id: uuid.UUID = Field(description="User unique identifier")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address")

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Register/login response: the user plus a bearer token."""

    message: str
    user: UserResponse
    token: str = Field(description="Signed bearer token, valid for 7 days")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful",
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "name": "Jane Doe",
                    "email": "jane@example.com",
                },
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        }
    )
