"""
Authentication Dependencies
Resolves the caller from the `user-id` header and gates routes by role
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy import select

from clubify.database import database, row_to_dict
from clubify.models import User

logger = logging.getLogger(__name__)

USER_ID_HEADER = "user-id"

users = User.__table__


async def _find_user(identifier: str) -> Optional[dict]:
    row = await database.fetch_one(select(users).where(users.c.id == identifier))
    if row is None:
        # Older clients stored the email where the id belongs
        row = await database.fetch_one(select(users).where(users.c.email == identifier.lower()))
    return row_to_dict(row, users)


async def get_current_user(identifier: Optional[str] = Header(None, alias=USER_ID_HEADER)) -> dict:
    """
    Get the current user from the `user-id` header

    The header carries a raw user identifier. There is no signature,
    expiry or revocation; whoever sends a valid id is that user.

    Returns:
        User record without the password hash

    Raises:
        HTTPException: 401 if the header is missing or matches no user
    """
    if not identifier:
        logger.info("Rejected request without %s header", USER_ID_HEADER)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required"
        )

    user = await _find_user(identifier.strip())

    if user is None:
        logger.info("No user found for identifier %s", identifier)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )

    if not user["is_active"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is deactivated. Contact a board member."
        )

    user.pop("password_hash", None)
    return user


def require_role(*roles: str):
    """
    Build a dependency that only lets the given roles through

    Usage:
        current_user: dict = Depends(require_role("lead", "board"))
    """
    allowed = tuple(roles)

    async def role_gate(current_user: dict = Depends(get_current_user)) -> dict:
        if current_user["role"] not in allowed:
            logger.info(
                "Denied %s (%s); route requires %s",
                current_user["name"], current_user["role"], "/".join(allowed)
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required: {' or '.join(allowed)}, "
                       f"Current: {current_user['role']}"
            )
        return current_user

    return role_gate


get_lead_or_board = require_role("lead", "board")
get_board_member = require_role("board")
