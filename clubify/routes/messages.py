"""
Message and Email Relay Routes
"""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status

from clubify.auth import get_current_user
from clubify.schemas.message import (
    CreateMessageRequest,
    MessageEnvelope,
    MessageListResponse,
    SendEmailRequest,
    SendEmailResponse,
)
from clubify.services.email_service import email_service
from clubify.services.message_service import message_service

router = APIRouter()


@router.get("/messages", response_model=MessageListResponse)
async def list_messages(
    box: Optional[Literal["sent", "received"]] = Query(None, alias="type"),
    current_user: dict = Depends(get_current_user)
):
    """Received messages by default; ?type=sent for the outbox"""
    messages = await message_service.list_messages(current_user, box)
    return {"success": True, "messages": messages}


@router.post("/messages", response_model=MessageEnvelope, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: CreateMessageRequest,
    current_user: dict = Depends(get_current_user)
):
    """Send an internal message"""
    message = await message_service.send_message(request, current_user)
    return {"success": True, "message": "Message sent successfully", "data": message}


@router.put("/messages/{message_id}/read")
async def mark_message_read(
    message_id: str,
    current_user: dict = Depends(get_current_user)
):
    """Mark a received message as read (recipient only)"""
    await message_service.mark_read(message_id, current_user)
    return {"success": True, "message": "Message marked as read"}


@router.post("/send-email", response_model=SendEmailResponse)
async def send_email(
    request: SendEmailRequest,
    current_user: dict = Depends(get_current_user)
):
    """
    Email a lead or board member

    - **recipientId**, **subject**, **message**: required

    The recipient can reply straight to the sender's address.
    """
    recipient = await email_service.relay_to_leader(current_user, request)
    return {
        "success": True,
        "message": f"Email sent successfully to {recipient['name']}",
        "recipient": recipient
    }
