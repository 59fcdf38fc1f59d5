"""
Product Service
Club merchandise catalogue
"""

import logging

from fastapi import HTTPException, status
from sqlalchemy import select

from clubify.database import database, new_id, utcnow, row_to_dict
from clubify.models import Product
from clubify.schemas.product import CreateProductRequest
from clubify.services.club_service import club_service
from clubify.services.populate import clubs_by_id

logger = logging.getLogger(__name__)

products = Product.__table__


class ProductService:
    """Service for product operations"""

    @staticmethod
    async def _serialize(product_rows: list) -> list:
        product_dicts = [row_to_dict(row, products) for row in product_rows]
        club_refs = await clubs_by_id(p["club_id"] for p in product_dicts)
        for product in product_dicts:
            product["club"] = club_refs.get(product.pop("club_id"))
            product["tags"] = product["tags"] or []
        return product_dicts

    @staticmethod
    async def get_product(product_id: str) -> dict:
        row = await database.fetch_one(select(products).where(products.c.id == product_id))
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found"
            )
        return (await ProductService._serialize([row]))[0]

    @staticmethod
    async def list_products() -> list:
        """Active products, newest first"""
        rows = await database.fetch_all(
            select(products)
            .where(products.c.is_active == True)  # noqa: E712
            .order_by(products.c.created_at.desc())
        )
        return await ProductService._serialize(rows)

    @staticmethod
    async def create_product(data: CreateProductRequest, actor: dict) -> dict:
        club_id = await club_service.resolve_club(data.club, actor)

        product_id = new_id()
        now = utcnow()
        await database.execute(
            products.insert().values(
                id=product_id,
                name=data.name,
                description=data.description,
                price=data.price,
                cost=data.cost,
                stock=data.stock,
                category=data.category,
                tags=data.tags,
                club_id=club_id,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("Product '%s' created by %s", data.name, actor["email"])
        return await ProductService.get_product(product_id)


# Create singleton instance
product_service = ProductService()
