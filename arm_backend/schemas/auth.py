"""
Schemas for account sign-up / sign-in and admin verification.
"""
import uuid

from pydantic import EmailStr, Field, field_validator

from .base import BaseSchema, UtcDatetime


class SignUpRequest(BaseSchema):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1)

    @field_validator('email', mode='after')
    @classmethod
    def lowercase_email(cls, v):
        return v.lower()


class SignInRequest(BaseSchema):
    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator('email', mode='after')
    @classmethod
    def lowercase_email(cls, v):
        return v.lower()


class UserRead(BaseSchema):
    id: uuid.UUID
    email: str
    name: str
    created_at: UtcDatetime


class SessionInfo(BaseSchema):
    expires_at: UtcDatetime


class AuthResponse(BaseSchema):
    token: str
    user: UserRead


class SessionResponse(BaseSchema):
    session: SessionInfo
    user: UserRead


class AdminVerifyResponse(BaseSchema):
    success: bool = True
    username: str
