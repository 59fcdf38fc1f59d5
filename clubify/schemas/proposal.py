"""
Proposal and Review Request/Response Models
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from clubify.schemas.base import CamelModel, ClubRef, UserRef, DEFAULT_CLUB, blank_to_none, split_lines

ProposalCategory = Literal["event", "activity", "improvement", "funding", "other"]
ProposalStatus = Literal["pending", "under_review", "approved", "rejected", "implemented"]
ProposalPriority = Literal["low", "medium", "high"]
ReviewDecision = Literal["approved", "rejected", "needs_revision"]

# Review decisions that settle the proposal's overall status
DECISIVE_REVIEWS = ("approved", "rejected")


class CreateProposalRequest(CamelModel):
    """Request to submit a proposal"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    category: ProposalCategory = "other"
    priority: ProposalPriority = "medium"
    estimated_cost: Optional[float] = Field(None, ge=0)
    estimated_duration: Optional[str] = None
    requirements: list[str] = []
    benefits: list[str] = []
    risks: list[str] = []
    club: str = DEFAULT_CLUB

    @field_validator("estimated_cost", "estimated_duration", mode="before")
    @classmethod
    def empty_is_missing(cls, v):
        return blank_to_none(v)

    @field_validator("requirements", "benefits", "risks", mode="before")
    @classmethod
    def lines_to_list(cls, v):
        return split_lines(v)


class ReviewProposalRequest(CamelModel):
    status: ReviewDecision
    comments: Optional[str] = None


class ReviewResponse(CamelModel):
    id: str
    reviewer: Optional[UserRef]
    status: ReviewDecision
    comments: Optional[str] = None
    reviewed_at: datetime


class ProposalResponse(CamelModel):
    id: str
    title: str
    description: str
    proposer: Optional[UserRef]
    club: Optional[ClubRef]
    category: ProposalCategory
    status: ProposalStatus
    priority: ProposalPriority
    estimated_cost: Optional[float] = None
    estimated_duration: Optional[str] = None
    requirements: list[str] = []
    benefits: list[str] = []
    risks: list[str] = []
    reviews: list[ReviewResponse] = []
    created_at: datetime
    updated_at: datetime


class ProposalEnvelope(CamelModel):
    success: bool = True
    message: str
    proposal: ProposalResponse


class ProposalListResponse(CamelModel):
    success: bool = True
    proposals: list[ProposalResponse]
