"""
Club Model
Clubs and their member roster
"""

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from clubify.database import Base


class Club(Base):
    __tablename__ = "clubs"

    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False)
    category = Column(String(20), nullable=False, default="other")

    # True on the default club only; NULL elsewhere so the unique index allows a single default
    is_default = Column(Boolean, nullable=True, unique=True)

    # Null only for the default club before a lead or board member claims it
    admin_id = Column(String(36), ForeignKey("users.id"), nullable=True)

    # Settings
    is_active = Column(Boolean, default=True)
    is_public = Column(Boolean, default=True)
    allow_member_invites = Column(Boolean, default=True)
    require_approval = Column(Boolean, default=False)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    admin = relationship("User", backref="administered_clubs")


class ClubMember(Base):
    __tablename__ = "club_members"
    __table_args__ = (UniqueConstraint("club_id", "user_id"),)

    id = Column(String(36), primary_key=True)
    club_id = Column(String(36), ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    # member | moderator | admin
    role = Column(String(20), nullable=False, default="member")
    joined_at = Column(DateTime, nullable=False)

    club = relationship("Club", backref="members")
    user = relationship("User", backref="memberships")
