"""
Event Model
Club events and their registered attendees
"""

from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from clubify.database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(200), nullable=True)

    club_id = Column(String(36), ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False)
    organizer_id = Column(String(36), ForeignKey("users.id"), nullable=False)

    start_date = Column(DateTime, nullable=False, index=True)
    end_date = Column(DateTime, nullable=True)
    category = Column(String(20), nullable=False, default="other")
    status = Column(String(20), nullable=False, default="published")
    max_attendees = Column(Integer, nullable=True)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    club = relationship("Club", backref="events")
    organizer = relationship("User", backref="organized_events")


class EventAttendee(Base):
    __tablename__ = "event_attendees"
    __table_args__ = (UniqueConstraint("event_id", "user_id"),)

    id = Column(String(36), primary_key=True)
    event_id = Column(String(36), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    registered_at = Column(DateTime, nullable=False)

    event = relationship("Event", backref="attendees")
