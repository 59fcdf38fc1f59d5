"""
Task Routes
"""

from fastapi import APIRouter, Depends, status

from clubify.auth import get_current_user, get_lead_or_board
from clubify.schemas.task import CreateTaskRequest, UpdateTaskRequest, TaskEnvelope, TaskListResponse
from clubify.services.task_service import task_service

router = APIRouter()


@router.get("/tasks", response_model=TaskListResponse)
async def list_tasks(current_user: dict = Depends(get_current_user)):
    """
    Tasks visible to the caller, earliest deadline first

    Members get tasks assigned to them, leads get tasks they assigned,
    board members get every task.
    """
    tasks = await task_service.list_tasks(current_user)
    return {"success": True, "tasks": tasks}


@router.post("/tasks", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    current_user: dict = Depends(get_lead_or_board)
):
    """
    Assign a task (Lead / Board only)

    - **title**, **assignedTo**, **deadline**: required
    - **priority**: low, medium (default), high or urgent
    - **club**: club id or "default-club"
    """
    task = await task_service.create_task(request, current_user)
    return {"success": True, "message": "Task created successfully", "task": task}


@router.put("/tasks/{task_id}", response_model=TaskEnvelope)
async def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    current_user: dict = Depends(get_current_user)
):
    """Update status and/or add a note (assignee or assigner only)"""
    task = await task_service.update_task(task_id, request, current_user)
    return {"success": True, "message": "Task updated successfully", "task": task}
