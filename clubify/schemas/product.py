"""
Product, Sale and Sales Analytics Request/Response Models
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from clubify.schemas.base import CamelModel, ClubRef, ProductRef, UserRef, DEFAULT_CLUB, blank_to_none

ProductCategory = Literal["merchandise", "tickets", "food", "services", "other"]
PaymentMethod = Literal["cash", "card", "online", "other"]
SaleStatus = Literal["pending", "completed", "cancelled", "refunded"]


class CreateProductRequest(CamelModel):
    """Request to add a product"""
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    cost: float = Field(..., ge=0)
    stock: int = Field(0, ge=0)
    category: ProductCategory = "other"
    tags: list[str] = []
    club: str = DEFAULT_CLUB

    @field_validator("stock", mode="before")
    @classmethod
    def empty_stock(cls, v):
        v = blank_to_none(v)
        return 0 if v is None else v


class ProductResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    price: float
    cost: float
    stock: int
    category: ProductCategory
    tags: list[str] = []
    club: Optional[ClubRef]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ProductEnvelope(CamelModel):
    success: bool = True
    message: str
    product: ProductResponse


class ProductListResponse(CamelModel):
    success: bool = True
    products: list[ProductResponse]


class Buyer(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class CreateSaleRequest(CamelModel):
    """
    Request to record a sale

    totalAmount is stored as sent. When omitted it defaults to
    quantity * unitPrice.
    """
    product: str = Field(..., min_length=1, description="Product id")
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    total_amount: Optional[float] = Field(None, ge=0)
    buyer: Buyer = Buyer()
    payment_method: PaymentMethod = "cash"
    status: SaleStatus = "completed"
    notes: Optional[str] = None
    club: str = DEFAULT_CLUB


class SaleResponse(CamelModel):
    id: str
    product: Optional[ProductRef]
    club: Optional[ClubRef]
    seller: Optional[UserRef]
    buyer: Buyer
    quantity: int
    unit_price: float
    total_amount: float
    payment_method: PaymentMethod
    status: SaleStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SaleEnvelope(CamelModel):
    success: bool = True
    message: str
    sale: SaleResponse


class ProductSales(CamelModel):
    quantity: int
    amount: float


class SalesAnalytics(CamelModel):
    total_sales: float
    # Keyed by product name, not camel-cased
    sales_by_product: dict[str, ProductSales]
    total_transactions: int


class SaleListResponse(CamelModel):
    success: bool = True
    sales: list[SaleResponse]
    analytics: SalesAnalytics


class PieSegment(CamelModel):
    product_name: str
    amount: float
    quantity: int
    percentage: float
    start_angle: float
    end_angle: float
    color: str
    path: str


class SalesChartResponse(CamelModel):
    success: bool = True
    analytics: SalesAnalytics
    segments: list[PieSegment]
