"""
Proposal Service
Submission and the review workflow
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy import select

from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import Proposal, ProposalReview
from clubify.schemas.proposal import CreateProposalRequest, ReviewProposalRequest, DECISIVE_REVIEWS
from clubify.services.club_service import club_service
from clubify.services.populate import users_by_id, clubs_by_id

logger = logging.getLogger(__name__)

proposals = Proposal.__table__
proposal_reviews = ProposalReview.__table__


class ProposalService:
    """Service for proposal operations"""

    @staticmethod
    async def _serialize(proposal_rows: list) -> list:
        proposal_dicts = [row_to_dict(row, proposals) for row in proposal_rows]
        if not proposal_dicts:
            return []

        review_rows = await database.fetch_all(
            select(proposal_reviews)
            .where(proposal_reviews.c.proposal_id.in_([p["id"] for p in proposal_dicts]))
            .order_by(proposal_reviews.c.reviewed_at.asc())
        )
        reviews = [row_to_dict(row, proposal_reviews) for row in review_rows]

        people = await users_by_id(
            [p["proposer_id"] for p in proposal_dicts] + [r["reviewer_id"] for r in reviews]
        )
        club_refs = await clubs_by_id(p["club_id"] for p in proposal_dicts)

        for proposal in proposal_dicts:
            proposal["proposer"] = people.get(proposal.pop("proposer_id"))
            proposal["club"] = club_refs.get(proposal.pop("club_id"))
            for field in ("requirements", "benefits", "risks"):
                proposal[field] = proposal[field] or []
            proposal["reviews"] = [
                {
                    "id": review["id"],
                    "reviewer": people.get(review["reviewer_id"]),
                    "status": review["status"],
                    "comments": review["comments"],
                    "reviewed_at": review["reviewed_at"],
                }
                for review in reviews
                if review["proposal_id"] == proposal["id"]
            ]
        return proposal_dicts

    @staticmethod
    async def get_proposal(proposal_id: str) -> dict:
        row = await database.fetch_one(select(proposals).where(proposals.c.id == proposal_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Proposal not found"
            )
        return (await ProposalService._serialize([row]))[0]

    @staticmethod
    def scoped_query(user: dict):
        """Members only see their own proposals; leads and board see all"""
        query = select(proposals)
        if user["role"] == "member":
            query = query.where(proposals.c.proposer_id == user["id"])
        return query

    @staticmethod
    async def list_proposals(user: dict) -> list:
        rows = await database.fetch_all(
            ProposalService.scoped_query(user).order_by(proposals.c.created_at.desc())
        )
        return await ProposalService._serialize(rows)

    @staticmethod
    async def create_proposal(data: CreateProposalRequest, actor: dict) -> dict:
        club_id = await club_service.resolve_club(data.club, actor)

        proposal_id = new_id()
        now = utcnow()
        await database.execute(
            proposals.insert().values(
                id=proposal_id,
                title=data.title,
                description=data.description,
                proposer_id=actor["id"],
                club_id=club_id,
                category=data.category,
                status="pending",
                priority=data.priority,
                estimated_cost=data.estimated_cost,
                estimated_duration=data.estimated_duration,
                requirements=data.requirements,
                benefits=data.benefits,
                risks=data.risks,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("Proposal '%s' submitted by %s", data.title, actor["email"])
        return await ProposalService.get_proposal(proposal_id)

    @staticmethod
    async def review_proposal(proposal_id: str, data: ReviewProposalRequest, reviewer: dict) -> dict:
        """
        Append a review to a proposal

        Reviews are never edited or removed. The proposal's own status
        follows the review only when the decision is approved or
        rejected; needs_revision leaves it untouched.
        """
        row = await database.fetch_one(select(proposals.c.id).where(proposals.c.id == proposal_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Proposal not found"
            )

        now = utcnow()
        changes = {"updated_at": now}
        if data.status in DECISIVE_REVIEWS:
            changes["status"] = data.status

        # The review and the status it decides land together or not at all
        async with database.transaction():
            await database.execute(
                proposal_reviews.insert().values(
                    id=new_id(),
                    proposal_id=proposal_id,
                    reviewer_id=reviewer["id"],
                    status=data.status,
                    comments=data.comments,
                    reviewed_at=now,
                )
            )
            await database.execute(
                proposals.update().where(proposals.c.id == proposal_id).values(**changes)
            )

        logger.info("Proposal %s reviewed by %s: %s", proposal_id, reviewer["email"], data.status)
        return await ProposalService.get_proposal(proposal_id)


# Create singleton instance
proposal_service = ProposalService()
