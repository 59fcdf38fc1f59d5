"""
Task Service
Role-scoped task assignment and progress updates
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy import select

from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import Task, TaskNote, User
from clubify.schemas.task import CreateTaskRequest, UpdateTaskRequest
from clubify.services.club_service import club_service
from clubify.services.populate import users_by_id, clubs_by_id

logger = logging.getLogger(__name__)

tasks = Task.__table__
task_notes = TaskNote.__table__
users = User.__table__


class TaskService:
    """Service for task operations"""

    @staticmethod
    async def _serialize(task_rows: list) -> list:
        task_dicts = [row_to_dict(row, tasks) for row in task_rows]
        if not task_dicts:
            return []

        note_rows = await database.fetch_all(
            select(task_notes)
            .where(task_notes.c.task_id.in_([t["id"] for t in task_dicts]))
            .order_by(task_notes.c.created_at.asc())
        )
        notes = [row_to_dict(row, task_notes) for row in note_rows]

        people = await users_by_id(
            [t["assigned_by"] for t in task_dicts]
            + [t["assigned_to"] for t in task_dicts]
            + [n["user_id"] for n in notes]
        )
        club_refs = await clubs_by_id(t["club_id"] for t in task_dicts)

        for task in task_dicts:
            task["assigned_by"] = people.get(task["assigned_by"])
            task["assigned_to"] = people.get(task["assigned_to"])
            task["club"] = club_refs.get(task.pop("club_id"))
            task["notes"] = [
                {
                    "id": note["id"],
                    "user": people.get(note["user_id"]),
                    "content": note["content"],
                    "created_at": note["created_at"],
                }
                for note in notes
                if note["task_id"] == task["id"]
            ]
        return task_dicts

    @staticmethod
    async def get_task(task_id: str) -> dict:
        row = await database.fetch_one(select(tasks).where(tasks.c.id == task_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Task not found"
            )
        return (await TaskService._serialize([row]))[0]

    @staticmethod
    def scoped_query(user: dict):
        """
        Tasks visible to a user

        Members see what was assigned to them, leads see what they
        assigned, board members see everything.
        """
        query = select(tasks)
        if user["role"] == "member":
            query = query.where(tasks.c.assigned_to == user["id"])
        elif user["role"] == "lead":
            query = query.where(tasks.c.assigned_by == user["id"])
        return query

    @staticmethod
    async def list_tasks(user: dict) -> list:
        rows = await database.fetch_all(
            TaskService.scoped_query(user).order_by(tasks.c.deadline.asc(), tasks.c.created_at.asc())
        )
        return await TaskService._serialize(rows)

    @staticmethod
    async def create_task(data: CreateTaskRequest, actor: dict) -> dict:
        """Assign a task to another user"""
        assignee = await database.fetch_one(select(users.c.id).where(users.c.id == data.assigned_to))
        if not assignee:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Assigned user not found"
            )

        club_id = await club_service.resolve_club(data.club, actor)

        task_id = new_id()
        now = utcnow()
        await database.execute(
            tasks.insert().values(
                id=task_id,
                title=data.title,
                description=data.description,
                assigned_by=actor["id"],
                assigned_to=data.assigned_to,
                club_id=club_id,
                deadline=data.deadline,
                priority=data.priority,
                status="pending",
                completed_at=None,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("Task '%s' assigned by %s to %s", data.title, actor["email"], data.assigned_to)
        return await TaskService.get_task(task_id)

    @staticmethod
    async def update_task(task_id: str, data: UpdateTaskRequest, actor: dict) -> dict:
        """Change status and/or append a note; only the assignee or assigner may"""
        row = await database.fetch_one(select(tasks).where(tasks.c.id == task_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Task not found"
            )

        if actor["id"] not in (row["assigned_to"], row["assigned_by"]):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized to update this task"
            )

        now = utcnow()
        changes = {"updated_at": now}
        if data.status:
            changes["status"] = data.status
            changes["completed_at"] = now if data.status == "completed" else None

        async with database.transaction():
            await database.execute(tasks.update().where(tasks.c.id == task_id).values(**changes))

            if data.notes and data.notes.strip():
                await database.execute(
                    task_notes.insert().values(
                        id=new_id(),
                        task_id=task_id,
                        user_id=actor["id"],
                        content=data.notes.strip(),
                        created_at=now,
                    )
                )

        return await TaskService.get_task(task_id)


# Create singleton instance
task_service = TaskService()
