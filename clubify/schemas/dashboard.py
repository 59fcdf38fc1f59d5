"""
Dashboard Response Models
"""

from typing import Optional

from clubify.schemas.base import CamelModel
from clubify.schemas.product import SalesAnalytics
from clubify.schemas.user import SessionUser


class DashboardResponse(CamelModel):
    """Role-scoped overview for the dashboard landing tab"""
    success: bool = True
    user: SessionUser
    total_tasks: int
    pending_tasks: int
    upcoming_events: int
    total_proposals: int
    pending_proposals: int
    unread_messages: int
    sales: Optional[SalesAnalytics] = None
