"""
User and Authentication Request/Response Models
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from clubify.schemas.base import CamelModel

Role = Literal["member", "lead", "board"]


class SignupRequest(CamelModel):
    """Request to create an account"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SessionUser(CamelModel):
    """User identity handed back to the client after login/signup"""
    id: str
    name: str
    email: str
    role: Role


class AuthResponse(CamelModel):
    success: bool = True
    message: str
    user: SessionUser


class UserResponse(CamelModel):
    """User details (never includes the password hash)"""
    id: str
    name: str
    email: str
    role: Role
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime


class UserListResponse(CamelModel):
    success: bool = True
    users: list[UserResponse]


class UserEnvelope(CamelModel):
    success: bool = True
    message: str
    user: UserResponse


class UpdateRoleRequest(CamelModel):
    role: Role


class UpdateStatusRequest(CamelModel):
    is_active: bool = Field(..., description="False deactivates the account")
