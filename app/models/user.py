"""
User models for the demo login.
"""

from pydantic import BaseModel, Field
from enum import Enum
from typing import Optional


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class LoginRequest(BaseModel):
    """Email and password of one of the demo accounts."""
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Public view of a user (never includes the password)."""
    id: str
    name: str
    email: str
    role: UserRole


class AuthResponse(BaseModel):
    """Authentication response."""
    token: str
    user: Optional[UserResponse] = None
