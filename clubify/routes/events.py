"""
Event Routes
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from clubify.auth import get_current_user, get_lead_or_board
from clubify.schemas.event import CreateEventRequest, EventEnvelope, EventListResponse, EventStatus
from clubify.services.event_service import event_service

router = APIRouter()


@router.get("/events", response_model=EventListResponse)
async def list_events(
    status_filter: Optional[EventStatus] = Query(None, alias="status"),
    upcoming: bool = Query(False, description="Only events that haven't started yet"),
    current_user: dict = Depends(get_current_user)
):
    """List events, soonest first"""
    events = await event_service.list_events(status_filter, upcoming)
    return {"success": True, "events": events}


@router.post("/events", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: CreateEventRequest,
    current_user: dict = Depends(get_lead_or_board)
):
    """
    Create an event (Lead / Board only)

    - **title**, **startDate**: required
    - **endDate**: must not be before startDate
    - **maxAttendees**: optional capacity
    """
    event = await event_service.create_event(request, current_user)
    return {"success": True, "message": "Event created successfully", "event": event}


@router.post("/events/{event_id}/attend", response_model=EventEnvelope)
async def attend_event(
    event_id: str,
    current_user: dict = Depends(get_current_user)
):
    """Register the caller for an event"""
    event = await event_service.attend_event(event_id, current_user)
    return {"success": True, "message": "Registered for event", "event": event}
