"""
Message and Email Relay Request/Response Models
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from clubify.schemas.base import CamelModel, ClubRef, UserRef, DEFAULT_CLUB

MessagePriority = Literal["low", "medium", "high", "urgent"]


class CreateMessageRequest(CamelModel):
    recipient: str = Field(..., min_length=1, description="Recipient user id")
    subject: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    priority: MessagePriority = "medium"
    club: str = DEFAULT_CLUB


class MessageResponse(CamelModel):
    id: str
    sender: Optional[UserRef]
    recipient: Optional[UserRef]
    club: Optional[ClubRef]
    subject: str
    content: str
    priority: MessagePriority
    is_read: bool
    read_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class MessageEnvelope(CamelModel):
    success: bool = True
    message: str
    # Sent record; named so it doesn't collide with the status text
    data: MessageResponse


class MessageListResponse(CamelModel):
    success: bool = True
    messages: list[MessageResponse]


class SendEmailRequest(CamelModel):
    """Email relay request; fields are checked by the service for a single error message"""
    recipient_id: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class EmailRecipient(CamelModel):
    name: str
    email: str
    role: str


class SendEmailResponse(CamelModel):
    success: bool = True
    message: str
    recipient: EmailRecipient
