"""
Dashboard Service
Role-scoped overview counts
"""

from sqlalchemy import select, func

from clubify.database import database
from clubify.models import Message, Proposal, Task
from clubify.services.event_service import event_service
from clubify.services.proposal_service import proposal_service
from clubify.services.sale_service import sale_service
from clubify.services.task_service import task_service

messages = Message.__table__
proposals = Proposal.__table__
tasks = Task.__table__


async def _count(query) -> int:
    subquery = query.subquery()
    value = await database.fetch_val(select(func.count()).select_from(subquery))
    return value or 0


class DashboardService:
    """Service for the dashboard overview"""

    @staticmethod
    async def get_overview(user: dict) -> dict:
        task_query = task_service.scoped_query(user)
        proposal_query = proposal_service.scoped_query(user)

        overview = {
            "user": user,
            "total_tasks": await _count(task_query),
            "pending_tasks": await _count(task_query.where(tasks.c.status == "pending")),
            "upcoming_events": await _count(event_service.filtered_query(upcoming=True)),
            "total_proposals": await _count(proposal_query),
            "pending_proposals": await _count(proposal_query.where(proposals.c.status == "pending")),
            "unread_messages": await _count(
                select(messages.c.id).where(
                    (messages.c.recipient_id == user["id"]) & (messages.c.is_read == False)  # noqa: E712
                )
            ),
            "sales": None,
        }

        if user["role"] != "member":
            overview["sales"] = (await sale_service.list_sales_with_analytics())["analytics"]

        return overview


# Create singleton instance
dashboard_service = DashboardService()
