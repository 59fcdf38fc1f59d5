"""
Database Models
Import all models here for Alembic migrations
"""

from clubify.models.user import User
from clubify.models.club import Club, ClubMember
from clubify.models.task import Task, TaskNote
from clubify.models.event import Event, EventAttendee
from clubify.models.product import Product, Sale
from clubify.models.proposal import Proposal, ProposalReview
from clubify.models.message import Message

__all__ = [
    "User",
    "Club",
    "ClubMember",
    "Task",
    "TaskNote",
    "Event",
    "EventAttendee",
    "Product",
    "Sale",
    "Proposal",
    "ProposalReview",
    "Message",
]
