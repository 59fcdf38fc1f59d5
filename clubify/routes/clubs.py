"""
Club Routes
Clubs, membership and the default club
"""

from fastapi import APIRouter, Depends, status

from clubify.auth import get_current_user, get_lead_or_board
from clubify.schemas.club import (
    AddMemberRequest,
    ClubEnvelope,
    ClubListResponse,
    CreateClubRequest,
    DefaultClubIdResponse,
)
from clubify.services.club_service import club_service

router = APIRouter()


@router.get("/clubs", response_model=ClubListResponse)
async def list_clubs(current_user: dict = Depends(get_current_user)):
    """List active clubs with admin and members"""
    clubs = await club_service.list_clubs()
    return {"success": True, "clubs": clubs}


@router.post("/clubs", response_model=ClubEnvelope, status_code=status.HTTP_201_CREATED)
async def create_club(
    request: CreateClubRequest,
    current_user: dict = Depends(get_lead_or_board)
):
    """
    Create a club (Lead / Board only)

    - **name**: Club name (required)
    - **description**: required
    - **category**: sports, academic, cultural, technology, social or other

    The caller becomes the club admin.
    """
    club = await club_service.create_club(request, current_user)
    return {"success": True, "message": "Club created successfully", "club": club}


@router.post("/clubs/{club_id}/members", response_model=ClubEnvelope, status_code=status.HTTP_201_CREATED)
async def add_club_member(
    club_id: str,
    request: AddMemberRequest,
    current_user: dict = Depends(get_lead_or_board)
):
    """Add a user to a club (Lead / Board only)"""
    club = await club_service.add_member(club_id, request)
    return {"success": True, "message": "Member added successfully", "club": club}


@router.post("/init-default-club", response_model=ClubEnvelope)
async def init_default_club():
    """
    Make sure the default club exists

    Safe to call repeatedly. The club has no admin until the first lead
    or board member creates something in it.
    """
    club = await club_service.ensure_default_club()
    return {
        "success": True,
        "message": "Default club initialized",
        "club": await club_service.get_club(club["id"])
    }


@router.get("/default-club-id", response_model=DefaultClubIdResponse)
async def get_default_club_id():
    """Id of the default club (404 until it has been created)"""
    club_id = await club_service.get_default_club_id()
    return {"success": True, "club_id": club_id}
