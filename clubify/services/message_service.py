"""
Message Service
Internal inbox/outbox
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select

from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import Message, User
from clubify.schemas.message import CreateMessageRequest
from clubify.services.club_service import club_service
from clubify.services.populate import users_by_id, clubs_by_id

logger = logging.getLogger(__name__)

messages = Message.__table__
users = User.__table__


class MessageService:
    """Service for message operations"""

    @staticmethod
    async def _serialize(message_rows: list) -> list:
        message_dicts = [row_to_dict(row, messages) for row in message_rows]
        if not message_dicts:
            return []

        people = await users_by_id(
            [m["sender_id"] for m in message_dicts] + [m["recipient_id"] for m in message_dicts],
            with_role=True
        )
        club_refs = await clubs_by_id(m["club_id"] for m in message_dicts)

        for message in message_dicts:
            message["sender"] = people.get(message.pop("sender_id"))
            message["recipient"] = people.get(message.pop("recipient_id"))
            message["club"] = club_refs.get(message.pop("club_id"))
        return message_dicts

    @staticmethod
    async def get_message(message_id: str) -> dict:
        row = await database.fetch_one(select(messages).where(messages.c.id == message_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Message not found"
            )
        return (await MessageService._serialize([row]))[0]

    @staticmethod
    async def list_messages(user: dict, box: Optional[str] = None) -> list:
        """Messages the user sent (box="sent") or received (anything else)"""
        query = select(messages)
        if box == "sent":
            query = query.where(messages.c.sender_id == user["id"])
        else:
            query = query.where(messages.c.recipient_id == user["id"])

        rows = await database.fetch_all(query.order_by(messages.c.created_at.desc()))
        return await MessageService._serialize(rows)

    @staticmethod
    async def send_message(data: CreateMessageRequest, actor: dict) -> dict:
        recipient = await database.fetch_one(select(users.c.id).where(users.c.id == data.recipient))
        if not recipient:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Recipient not found"
            )

        club_id = await club_service.resolve_club(data.club, actor)

        message_id = new_id()
        now = utcnow()
        await database.execute(
            messages.insert().values(
                id=message_id,
                sender_id=actor["id"],
                recipient_id=data.recipient,
                club_id=club_id,
                subject=data.subject,
                content=data.content,
                priority=data.priority,
                is_read=False,
                read_at=None,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("Message from %s to %s", actor["email"], data.recipient)
        return await MessageService.get_message(message_id)

    @staticmethod
    async def mark_read(message_id: str, actor: dict) -> None:
        """Only the recipient can mark a message as read"""
        row = await database.fetch_one(select(messages).where(messages.c.id == message_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Message not found"
            )

        if row["recipient_id"] != actor["id"]:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized to mark this message as read"
            )

        now = utcnow()
        await database.execute(
            messages.update()
            .where(messages.c.id == message_id)
            .values(is_read=True, read_at=now, updated_at=now)
        )


# Create singleton instance
message_service = MessageService()
