"""
Product and Sale Models
Club merchandise and the sales recorded against it
"""

from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship
from clubify.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    cost = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    category = Column(String(20), nullable=False, default="other")
    tags = Column(JSON, nullable=False, default=list)

    club_id = Column(String(36), ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False)
    is_active = Column(Boolean, default=True)

    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)

    club = relationship("Club", backref="products")


class Sale(Base):
    __tablename__ = "sales"

    id = Column(String(36), primary_key=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False, index=True)
    club_id = Column(String(36), ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False)
    seller_id = Column(String(36), ForeignKey("users.id"), nullable=False)

    # Buyer contact, flattened
    buyer_name = Column(String(100), nullable=True)
    buyer_email = Column(String(255), nullable=True)
    buyer_phone = Column(String(50), nullable=True)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    # Stored as submitted; not recomputed from quantity * unit_price
    total_amount = Column(Float, nullable=False)

    payment_method = Column(String(20), nullable=False, default="cash")
    status = Column(String(20), nullable=False, default="completed")
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False)

    product = relationship("Product", backref="sales")
    seller = relationship("User", backref="sales")
