"""
Club Service
Business logic for clubs and the default-club fallback
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select

from clubify.config import settings
from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import Club, ClubMember, User
from clubify.schemas.base import DEFAULT_CLUB
from clubify.schemas.club import CreateClubRequest, AddMemberRequest
from clubify.services.populate import users_by_id

logger = logging.getLogger(__name__)

clubs = Club.__table__
club_members = ClubMember.__table__
users = User.__table__


class ClubService:
    """Service for club management operations"""

    @staticmethod
    async def _serialize(club_rows: list) -> list:
        """Attach populated admin and member roster to club records"""
        club_dicts = [row_to_dict(row, clubs) for row in club_rows]
        if not club_dicts:
            return []

        member_rows = await database.fetch_all(
            select(club_members)
            .where(club_members.c.club_id.in_([c["id"] for c in club_dicts]))
            .order_by(club_members.c.joined_at.asc())
        )
        members = [row_to_dict(row, club_members) for row in member_rows]

        people = await users_by_id(
            [c["admin_id"] for c in club_dicts] + [m["user_id"] for m in members],
            with_role=True
        )

        for club in club_dicts:
            admin = people.get(club.pop("admin_id"))
            club["admin"] = {k: v for k, v in admin.items() if k != "role"} if admin else None
            club["members"] = [
                {"user": people.get(m["user_id"]), "role": m["role"], "joined_at": m["joined_at"]}
                for m in members
                if m["club_id"] == club["id"]
            ]
        return club_dicts

    @staticmethod
    async def list_clubs() -> list:
        """List active clubs"""
        rows = await database.fetch_all(
            select(clubs).where(clubs.c.is_active == True).order_by(clubs.c.created_at.asc())  # noqa: E712
        )
        return await ClubService._serialize(rows)

    @staticmethod
    async def get_club(club_id: str) -> dict:
        """Get club by ID"""
        row = await database.fetch_one(select(clubs).where(clubs.c.id == club_id))

        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Club not found"
            )

        return (await ClubService._serialize([row]))[0]

    @staticmethod
    async def _insert_club(name: str, description: str, category: str, admin_id: Optional[str],
                           is_default: Optional[bool] = None) -> str:
        club_id = new_id()
        now = utcnow()
        await database.execute(
            clubs.insert().values(
                id=club_id,
                name=name,
                description=description,
                category=category,
                is_default=is_default,
                admin_id=admin_id,
                is_active=True,
                is_public=True,
                allow_member_invites=True,
                require_approval=False,
                created_at=now,
                updated_at=now,
            )
        )
        return club_id

    @staticmethod
    async def create_club(data: CreateClubRequest, actor: dict) -> dict:
        """Create a new club administered by the caller"""
        club_id = await ClubService._insert_club(data.name, data.description, data.category, actor["id"])
        logger.info("Club '%s' created by %s", data.name, actor["email"])
        return await ClubService.get_club(club_id)

    @staticmethod
    async def add_member(club_id: str, data: AddMemberRequest) -> dict:
        """Add a user to a club roster"""
        await ClubService.get_club(club_id)

        user = await database.fetch_one(select(users.c.id).where(users.c.id == data.user_id))
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )

        existing = await database.fetch_one(
            select(club_members.c.id).where(
                (club_members.c.club_id == club_id) & (club_members.c.user_id == data.user_id)
            )
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User is already a member of this club"
            )

        await database.execute(
            club_members.insert().values(
                id=new_id(),
                club_id=club_id,
                user_id=data.user_id,
                role=data.role,
                joined_at=utcnow(),
            )
        )
        return await ClubService.get_club(club_id)

    @staticmethod
    async def find_default_club() -> Optional[dict]:
        row = await database.fetch_one(
            select(clubs)
            .where(clubs.c.is_default == True)  # noqa: E712
        )
        return row_to_dict(row, clubs)

    @staticmethod
    async def ensure_default_club(admin: Optional[dict] = None) -> dict:
        """
        Look up the default club, creating it on first use

        A lead or board member passing through claims an unowned
        default club as its admin.
        """
        club = await ClubService.find_default_club()

        if club is None:
            admin_id = admin["id"] if admin else None
            try:
                club_id = await ClubService._insert_club(
                    settings.DEFAULT_CLUB_NAME,
                    settings.DEFAULT_CLUB_DESCRIPTION,
                    "other",
                    admin_id,
                    is_default=True,
                )
            except Exception:
                # Another request created it first; the unique index kept ours out
                club = await ClubService.find_default_club()
                if club is None:
                    raise
                logger.info("Default club %s was created concurrently", club["id"])
                return club
            logger.info("Created default club %s", club_id)
            return row_to_dict(
                await database.fetch_one(select(clubs).where(clubs.c.id == club_id)), clubs
            )

        if club["admin_id"] is None and admin and admin["role"] in ("lead", "board"):
            await database.execute(
                clubs.update()
                .where(clubs.c.id == club["id"])
                .values(admin_id=admin["id"], updated_at=utcnow())
            )
            club["admin_id"] = admin["id"]
            logger.info("Default club claimed by %s", admin["email"])

        return club

    @staticmethod
    async def resolve_club(club_value: Optional[str], actor: dict) -> str:
        """
        Turn a club value from a request body into a real club id

        "default-club" (or no value) maps to the default club, which is
        created if it doesn't exist yet. Any other value must be an
        existing club id.
        """
        if not club_value or club_value == DEFAULT_CLUB:
            club = await ClubService.ensure_default_club(actor)
            return club["id"]

        row = await database.fetch_one(select(clubs.c.id).where(clubs.c.id == club_value))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Club not found"
            )
        return row["id"]

    @staticmethod
    async def get_default_club_id() -> str:
        club = await ClubService.find_default_club()
        if club is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Default club not found"
            )
        return club["id"]


# Create singleton instance
club_service = ClubService()
