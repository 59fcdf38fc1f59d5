"""
Authentication Module
Password hashing, header identity and role gates
"""

from clubify.auth.password import hash_password, verify_password, password_problem
from clubify.auth.dependencies import (
    USER_ID_HEADER,
    get_current_user,
    require_role,
    get_lead_or_board,
    get_board_member,
)

__all__ = [
    "hash_password",
    "verify_password",
    "password_problem",
    "USER_ID_HEADER",
    "get_current_user",
    "require_role",
    "get_lead_or_board",
    "get_board_member",
]
