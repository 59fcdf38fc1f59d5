"""
Shared schema building blocks
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Club value clients send when they don't know the real club id
DEFAULT_CLUB = "default-club"


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Timestamps are stored as naive UTC
UTCDatetime = Annotated[datetime, AfterValidator(_to_naive_utc)]


def split_lines(value):
    """Accept either a list or a newline separated string"""
    if value is None:
        return []
    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]
    return value


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CamelModel(BaseModel):
    """Base model speaking camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserRef(CamelModel):
    """Populated user reference"""
    id: str
    name: str
    email: str
    role: Optional[str] = None


class ClubRef(CamelModel):
    """Populated club reference"""
    id: str
    name: str


class ProductRef(CamelModel):
    """Populated product reference"""
    id: str
    name: str
    price: float
