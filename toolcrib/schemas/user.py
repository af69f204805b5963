"""User schemas for request/response validation."""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from toolcrib.models.user import UserRole
from toolcrib.schemas.base import CamelModel, UtcDateTime


class UserBase(CamelModel):
    """Base user schema."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    worker_id: str = Field(..., min_length=1)


class UserCreate(UserBase):
    """Schema for creating a user. Password is required for admins only."""
    password: Optional[str] = None
    role: UserRole = UserRole.ENGINEER

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value):
        # Anything other than ADMIN registers an engineer
        if isinstance(value, str) and value.strip().upper() == UserRole.ADMIN.value:
            return UserRole.ADMIN
        return UserRole.ENGINEER


class UserResponse(UserBase):
    """Schema for user response (never includes the password)."""
    id: int
    role: UserRole
    created_at: UtcDateTime


class LoginRequest(BaseModel):
    """Administrator sign-in."""
    email: str
    password: str


class Token(BaseModel):
    """JWT token schema."""
    access_token: str
    token_type: str


class TokenData(BaseModel):
    """Token payload data."""
    email: Optional[str] = None
    role: Optional[UserRole] = None
