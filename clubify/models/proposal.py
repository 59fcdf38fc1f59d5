"""
Proposal Model
Member proposals and the append-only review trail
"""

from sqlalchemy import Column, String, Float, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship
from clubify.database import Base


class Proposal(Base):
    __tablename__ = "proposals"

    id = Column(String(36), primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)

    proposer_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    club_id = Column(String(36), ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False)

    category = Column(String(20), nullable=False, default="other")
    status = Column(String(20), nullable=False, default="pending")
    priority = Column(String(10), nullable=False, default="medium")

    estimated_cost = Column(Float, nullable=True)
    estimated_duration = Column(String(100), nullable=True)
    requirements = Column(JSON, nullable=False, default=list)
    benefits = Column(JSON, nullable=False, default=list)
    risks = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)

    proposer = relationship("User", backref="proposals")
    club = relationship("Club", backref="proposals")


class ProposalReview(Base):
    __tablename__ = "proposal_reviews"

    id = Column(String(36), primary_key=True)
    proposal_id = Column(String(36), ForeignKey("proposals.id", ondelete="CASCADE"), nullable=False, index=True)
    reviewer_id = Column(String(36), ForeignKey("users.id"), nullable=False)

    # approved | rejected | needs_revision
    status = Column(String(20), nullable=False)
    comments = Column(Text, nullable=True)
    reviewed_at = Column(DateTime, nullable=False)

    proposal = relationship("Proposal", backref="reviews")
    reviewer = relationship("User")
