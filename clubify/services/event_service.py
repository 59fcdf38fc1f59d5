"""
Event Service
Event listing, creation and attendance
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select, func

from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import Event, EventAttendee
from clubify.schemas.event import CreateEventRequest
from clubify.services.club_service import club_service
from clubify.services.populate import users_by_id, clubs_by_id

logger = logging.getLogger(__name__)

events = Event.__table__
event_attendees = EventAttendee.__table__


class EventService:
    """Service for event operations"""

    @staticmethod
    async def _serialize(event_rows: list) -> list:
        event_dicts = [row_to_dict(row, events) for row in event_rows]
        if not event_dicts:
            return []

        attendee_rows = await database.fetch_all(
            select(event_attendees)
            .where(event_attendees.c.event_id.in_([e["id"] for e in event_dicts]))
            .order_by(event_attendees.c.registered_at.asc())
        )
        attendees = [row_to_dict(row, event_attendees) for row in attendee_rows]

        people = await users_by_id(
            [e["organizer_id"] for e in event_dicts] + [a["user_id"] for a in attendees]
        )
        club_refs = await clubs_by_id(e["club_id"] for e in event_dicts)

        for event in event_dicts:
            event["organizer"] = people.get(event.pop("organizer_id"))
            event["club"] = club_refs.get(event.pop("club_id"))
            event["attendees"] = [
                {"user": people.get(a["user_id"]), "registered_at": a["registered_at"]}
                for a in attendees
                if a["event_id"] == event["id"]
            ]
        return event_dicts

    @staticmethod
    async def get_event(event_id: str) -> dict:
        row = await database.fetch_one(select(events).where(events.c.id == event_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Event not found"
            )
        return (await EventService._serialize([row]))[0]

    @staticmethod
    def filtered_query(event_status: Optional[str] = None, upcoming: bool = False):
        query = select(events)
        if event_status:
            query = query.where(events.c.status == event_status)
        if upcoming:
            query = query.where(events.c.start_date >= utcnow())
        return query

    @staticmethod
    async def list_events(event_status: Optional[str] = None, upcoming: bool = False) -> list:
        """List events, soonest first"""
        rows = await database.fetch_all(
            EventService.filtered_query(event_status, upcoming).order_by(events.c.start_date.asc())
        )
        return await EventService._serialize(rows)

    @staticmethod
    async def create_event(data: CreateEventRequest, actor: dict) -> dict:
        club_id = await club_service.resolve_club(data.club, actor)

        event_id = new_id()
        now = utcnow()
        await database.execute(
            events.insert().values(
                id=event_id,
                title=data.title,
                description=data.description,
                location=data.location,
                club_id=club_id,
                organizer_id=actor["id"],
                start_date=data.start_date,
                end_date=data.end_date,
                category=data.category,
                status=data.status,
                max_attendees=data.max_attendees,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("Event '%s' created by %s", data.title, actor["email"])
        return await EventService.get_event(event_id)

    @staticmethod
    async def attend_event(event_id: str, actor: dict) -> dict:
        """Register the caller as an attendee"""
        row = await database.fetch_one(select(events).where(events.c.id == event_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Event not found"
            )

        if row["status"] in ("cancelled", "completed"):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Cannot register for a {row['status']} event"
            )

        existing = await database.fetch_one(
            select(event_attendees.c.id).where(
                (event_attendees.c.event_id == event_id) & (event_attendees.c.user_id == actor["id"])
            )
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Already registered for this event"
            )

        if row["max_attendees"] is not None:
            count = await database.fetch_val(
                select(func.count()).select_from(event_attendees).where(event_attendees.c.event_id == event_id)
            )
            if (count or 0) >= row["max_attendees"]:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Event is full"
                )

        await database.execute(
            event_attendees.insert().values(
                id=new_id(),
                event_id=event_id,
                user_id=actor["id"],
                registered_at=utcnow(),
            )
        )
        return await EventService.get_event(event_id)


# Create singleton instance
event_service = EventService()
