"""
Product and Sales Routes
"""

from fastapi import APIRouter, Depends, status

from clubify.auth import get_current_user, get_lead_or_board
from clubify.schemas.product import (
    CreateProductRequest,
    CreateSaleRequest,
    ProductEnvelope,
    ProductListResponse,
    SaleEnvelope,
    SaleListResponse,
    SalesChartResponse,
)
from clubify.services.product_service import product_service
from clubify.services.sale_service import sale_service

router = APIRouter()


@router.get("/products", response_model=ProductListResponse)
async def list_products(current_user: dict = Depends(get_current_user)):
    """Active products, newest first"""
    products = await product_service.list_products()
    return {"success": True, "products": products}


@router.post("/products", response_model=ProductEnvelope, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: CreateProductRequest,
    current_user: dict = Depends(get_lead_or_board)
):
    """
    Add a product (Lead / Board only)

    - **name**, **price**, **cost**: required; price, cost and stock can't be negative
    """
    product = await product_service.create_product(request, current_user)
    return {"success": True, "message": "Product created successfully", "product": product}


@router.get("/sales", response_model=SaleListResponse)
async def list_sales(current_user: dict = Depends(get_current_user)):
    """
    All sales, newest first, with totals

    analytics.salesByProduct is keyed by product name.
    """
    result = await sale_service.list_sales_with_analytics()
    return {"success": True, **result}


@router.get("/sales/analytics", response_model=SalesChartResponse)
async def sales_chart(current_user: dict = Depends(get_lead_or_board)):
    """Sales totals and pie-chart segments (Lead / Board only)"""
    result = await sale_service.get_chart()
    return {"success": True, **result}


@router.post("/sales", response_model=SaleEnvelope, status_code=status.HTTP_201_CREATED)
async def record_sale(
    request: CreateSaleRequest,
    current_user: dict = Depends(get_lead_or_board)
):
    """
    Record a sale (Lead / Board only)

    totalAmount is stored as sent and is not checked against
    quantity x unitPrice.
    """
    sale = await sale_service.create_sale(request, current_user)
    return {"success": True, "message": "Sale recorded successfully", "sale": sale}
