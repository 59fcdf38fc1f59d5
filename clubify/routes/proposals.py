"""
Proposal Routes
"""

from fastapi import APIRouter, Depends, status

from clubify.auth import get_current_user, get_lead_or_board
from clubify.schemas.proposal import (
    CreateProposalRequest,
    ProposalEnvelope,
    ProposalListResponse,
    ReviewProposalRequest,
)
from clubify.services.proposal_service import proposal_service

router = APIRouter()


@router.get("/proposals", response_model=ProposalListResponse)
async def list_proposals(current_user: dict = Depends(get_current_user)):
    """Members see their own proposals; leads and board see all"""
    proposals = await proposal_service.list_proposals(current_user)
    return {"success": True, "proposals": proposals}


@router.post("/proposals", response_model=ProposalEnvelope, status_code=status.HTTP_201_CREATED)
async def submit_proposal(
    request: CreateProposalRequest,
    current_user: dict = Depends(get_current_user)
):
    """
    Submit a proposal

    - **title**, **description**: required
    - **requirements**, **benefits**, **risks**: lists or newline separated text
    """
    proposal = await proposal_service.create_proposal(request, current_user)
    return {"success": True, "message": "Proposal submitted successfully", "proposal": proposal}


@router.put("/proposals/{proposal_id}/review", response_model=ProposalEnvelope)
async def review_proposal(
    proposal_id: str,
    request: ReviewProposalRequest,
    current_user: dict = Depends(get_lead_or_board)
):
    """
    Review a proposal (Lead / Board only)

    - **status**: approved, rejected or needs_revision
    - **comments**: optional

    Approving or rejecting also sets the proposal's status.
    """
    proposal = await proposal_service.review_proposal(proposal_id, request, current_user)
    return {"success": True, "message": "Proposal reviewed successfully", "proposal": proposal}
