"""
Pydantic schemas for request/response validation
"""

from clubify.schemas.base import CamelModel, UserRef, ClubRef, ProductRef, DEFAULT_CLUB

__all__ = [
    "CamelModel",
    "UserRef",
    "ClubRef",
    "ProductRef",
    "DEFAULT_CLUB",
]
