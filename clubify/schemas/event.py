"""
Event Request/Response Models
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from clubify.schemas.base import CamelModel, ClubRef, UserRef, UTCDatetime, DEFAULT_CLUB, blank_to_none

EventCategory = Literal["meeting", "workshop", "social", "sports", "academic", "other"]
EventStatus = Literal["draft", "published", "cancelled", "completed"]


class CreateEventRequest(CamelModel):
    """Request to create an event"""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = Field(None, max_length=200)
    start_date: UTCDatetime
    end_date: Optional[UTCDatetime] = None
    category: EventCategory = "other"
    status: EventStatus = "published"
    max_attendees: Optional[int] = Field(None, ge=1)
    club: str = DEFAULT_CLUB

    @field_validator("end_date", "max_attendees", mode="before")
    @classmethod
    def empty_is_missing(cls, v):
        return blank_to_none(v)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self


class AttendeeResponse(CamelModel):
    user: Optional[UserRef]
    registered_at: datetime


class EventResponse(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    club: Optional[ClubRef]
    organizer: Optional[UserRef]
    start_date: datetime
    end_date: Optional[datetime] = None
    category: EventCategory
    status: EventStatus
    max_attendees: Optional[int] = None
    attendees: list[AttendeeResponse] = []
    created_at: datetime
    updated_at: datetime


class EventEnvelope(CamelModel):
    success: bool = True
    message: str
    event: EventResponse


class EventListResponse(CamelModel):
    success: bool = True
    events: list[EventResponse]
