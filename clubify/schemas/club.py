"""
Club Request/Response Models
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from clubify.schemas.base import CamelModel, UserRef

ClubCategory = Literal["sports", "academic", "cultural", "technology", "social", "other"]
ClubRole = Literal["member", "moderator", "admin"]


class CreateClubRequest(CamelModel):
    """Request to create a new club"""
    name: str = Field(..., min_length=1, max_length=100, description="Club name")
    description: str = Field(..., min_length=1, description="What the club is about")
    category: ClubCategory = "other"


class AddMemberRequest(CamelModel):
    user_id: str
    role: ClubRole = "member"


class ClubMemberResponse(CamelModel):
    user: Optional[UserRef]
    role: ClubRole
    joined_at: datetime


class ClubResponse(CamelModel):
    """Club details response"""
    id: str
    name: str
    description: str
    category: str
    admin: Optional[UserRef] = None
    members: list[ClubMemberResponse] = []
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ClubEnvelope(CamelModel):
    success: bool = True
    message: str
    club: ClubResponse


class ClubListResponse(CamelModel):
    success: bool = True
    clubs: list[ClubResponse]


class DefaultClubIdResponse(CamelModel):
    success: bool = True
    club_id: str
