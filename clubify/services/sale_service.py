"""
Sale Service
Recording sales and summarizing them
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy import select

from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import Product, Sale
from clubify.schemas.product import CreateSaleRequest
from clubify.services.analytics import summarize_sales, pie_segments
from clubify.services.club_service import club_service
from clubify.services.populate import users_by_id, clubs_by_id, products_by_id

logger = logging.getLogger(__name__)

sales = Sale.__table__
products = Product.__table__


class SaleService:
    """Service for sale operations"""

    @staticmethod
    async def _serialize(sale_rows: list) -> list:
        sale_dicts = [row_to_dict(row, sales) for row in sale_rows]
        if not sale_dicts:
            return []

        product_refs = await products_by_id(s["product_id"] for s in sale_dicts)
        people = await users_by_id(s["seller_id"] for s in sale_dicts)
        club_refs = await clubs_by_id(s["club_id"] for s in sale_dicts)

        for sale in sale_dicts:
            sale["product"] = product_refs.get(sale.pop("product_id"))
            sale["seller"] = people.get(sale.pop("seller_id"))
            sale["club"] = club_refs.get(sale.pop("club_id"))
            sale["buyer"] = {
                "name": sale.pop("buyer_name"),
                "email": sale.pop("buyer_email"),
                "phone": sale.pop("buyer_phone"),
            }
        return sale_dicts

    @staticmethod
    async def get_sale(sale_id: str) -> dict:
        row = await database.fetch_one(select(sales).where(sales.c.id == sale_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Sale not found"
            )
        return (await SaleService._serialize([row]))[0]

    @staticmethod
    async def list_sales() -> list:
        """All sales, newest first"""
        rows = await database.fetch_all(
            select(sales).order_by(sales.c.created_at.desc())
        )
        return await SaleService._serialize(rows)

    @staticmethod
    async def list_sales_with_analytics() -> dict:
        sale_list = await SaleService.list_sales()
        return {
            "sales": sale_list,
            "analytics": summarize_sales(sale_list),
        }

    @staticmethod
    async def get_chart() -> dict:
        """Totals plus pie-chart segments for the analytics view"""
        summary = summarize_sales(await SaleService.list_sales())
        return {
            "analytics": summary,
            "segments": pie_segments(summary["sales_by_product"]),
        }

    @staticmethod
    async def create_sale(data: CreateSaleRequest, actor: dict) -> dict:
        """
        Record a sale made by the caller

        total_amount is kept exactly as submitted; it is only derived
        from quantity * unit_price when the client leaves it out.
        """
        product = await database.fetch_one(select(products.c.id).where(products.c.id == data.product))
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )

        club_id = await club_service.resolve_club(data.club, actor)

        total_amount = data.total_amount
        if total_amount is None:
            total_amount = data.quantity * data.unit_price

        sale_id = new_id()
        now = utcnow()
        await database.execute(
            sales.insert().values(
                id=sale_id,
                product_id=data.product,
                club_id=club_id,
                seller_id=actor["id"],
                buyer_name=data.buyer.name,
                buyer_email=data.buyer.email,
                buyer_phone=data.buyer.phone,
                quantity=data.quantity,
                unit_price=data.unit_price,
                total_amount=total_amount,
                payment_method=data.payment_method,
                status=data.status,
                notes=data.notes,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("Sale of %s x %s recorded by %s", data.quantity, data.product, actor["email"])
        return await SaleService.get_sale(sale_id)


# Create singleton instance
sale_service = SaleService()
