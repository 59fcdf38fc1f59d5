"""
User Service
Signup, login and board-level user management
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select, func, or_

from clubify.auth import hash_password, verify_password, password_problem
from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import User
from clubify.schemas.user import SignupRequest, LoginRequest

logger = logging.getLogger(__name__)

users = User.__table__


def _public(user: dict) -> dict:
    user = dict(user)
    user.pop("password_hash", None)
    return user


class UserService:
    """Service for user accounts"""

    @staticmethod
    async def get_user(user_id: str) -> dict:
        row = await database.fetch_one(select(users).where(users.c.id == user_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )
        return _public(row_to_dict(row, users))

    @staticmethod
    async def signup(data: SignupRequest) -> dict:
        """Create a new account; role defaults to member"""
        if not data.name or not data.email or not data.password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Name, email, and password are required"
            )

        problem = password_problem(data.password)
        if problem:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=problem
            )

        email = data.email.strip().lower()

        existing = await database.fetch_one(select(users.c.id).where(users.c.email == email))
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User with this email already exists"
            )

        user_id = new_id()
        now = utcnow()
        await database.execute(
            users.insert().values(
                id=user_id,
                name=data.name.strip(),
                email=email,
                password_hash=hash_password(data.password),
                role=data.role or "member",
                is_active=True,
                last_login=None,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("New %s account for %s", data.role or "member", email)
        return await UserService.get_user(user_id)

    @staticmethod
    async def login(data: LoginRequest) -> dict:
        """Check credentials and stamp last_login"""
        if not data.email or not data.password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email and password are required"
            )

        row = await database.fetch_one(
            select(users).where(users.c.email == data.email.strip().lower())
        )

        if not row or not verify_password(data.password, row["password_hash"]):
            logger.info("Failed login for %s", data.email)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials"
            )

        if not row["is_active"]:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Account is deactivated. Contact a board member."
            )

        await database.execute(
            users.update().where(users.c.id == row["id"]).values(last_login=utcnow())
        )

        return await UserService.get_user(row["id"])

    @staticmethod
    async def list_users(role: Optional[str] = None, search: Optional[str] = None) -> list:
        """Active users sorted by name, optionally filtered"""
        query = select(users).where(users.c.is_active == True)  # noqa: E712

        if role:
            query = query.where(users.c.role == role)

        if search:
            pattern = f"%{search.strip().lower()}%"
            query = query.where(
                or_(func.lower(users.c.name).like(pattern), func.lower(users.c.email).like(pattern))
            )

        rows = await database.fetch_all(query.order_by(users.c.name.asc()))
        return [_public(row_to_dict(row, users)) for row in rows]

    @staticmethod
    async def update_role(user_id: str, role: str, actor: dict) -> dict:
        user = await UserService.get_user(user_id)

        await database.execute(
            users.update().where(users.c.id == user_id).values(role=role, updated_at=utcnow())
        )

        logger.info("%s changed role of %s from %s to %s", actor["email"], user["email"], user["role"], role)
        return await UserService.get_user(user_id)

    @staticmethod
    async def set_active(user_id: str, is_active: bool, actor: dict) -> dict:
        if user_id == actor["id"] and not is_active:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="You cannot deactivate your own account"
            )

        user = await UserService.get_user(user_id)

        await database.execute(
            users.update().where(users.c.id == user_id).values(is_active=is_active, updated_at=utcnow())
        )

        logger.info("%s set %s active=%s", actor["email"], user["email"], is_active)
        return await UserService.get_user(user_id)


# Create singleton instance
user_service = UserService()
