"""
User Management Routes
Directory for leads and board; role and status changes for board
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from clubify.auth import get_lead_or_board, get_board_member
from clubify.schemas.user import Role, UserListResponse, UserEnvelope, UpdateRoleRequest, UpdateStatusRequest
from clubify.services.user_service import user_service

router = APIRouter()


@router.get("/users", response_model=UserListResponse)
async def list_users(
    role: Optional[Role] = Query(None, description="Only users with this role"),
    q: Optional[str] = Query(None, description="Search in name and email"),
    current_user: dict = Depends(get_lead_or_board)
):
    """
    List active users (Lead / Board only)
    """
    users = await user_service.list_users(role=role, search=q)
    return {"success": True, "users": users}


@router.put("/users/{user_id}/role", response_model=UserEnvelope)
async def update_user_role(
    user_id: str,
    request: UpdateRoleRequest,
    current_user: dict = Depends(get_board_member)
):
    """Change a user's role (Board only)"""
    user = await user_service.update_role(user_id, request.role, current_user)
    return {
        "success": True,
        "message": f"Role updated to {request.role}",
        "user": user
    }


@router.put("/users/{user_id}/status", response_model=UserEnvelope)
async def update_user_status(
    user_id: str,
    request: UpdateStatusRequest,
    current_user: dict = Depends(get_board_member)
):
    """Activate or deactivate a user (Board only)"""
    user = await user_service.set_active(user_id, request.is_active, current_user)
    return {
        "success": True,
        "message": "User activated" if request.is_active else "User deactivated",
        "user": user
    }
