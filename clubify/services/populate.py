"""
Reference Population
Batch lookups that replace foreign keys with small embedded records
"""

from typing import Iterable

from sqlalchemy import select

from clubify.database import database
from clubify.models import User, Club, Product

users = User.__table__
clubs = Club.__table__
products = Product.__table__


def _ids(values: Iterable) -> list:
    return sorted({value for value in values if value})


async def users_by_id(user_ids: Iterable, with_role: bool = False) -> dict:
    """Map user id -> {id, name, email[, role]}"""
    ids = _ids(user_ids)
    if not ids:
        return {}

    rows = await database.fetch_all(
        select(users.c.id, users.c.name, users.c.email, users.c.role).where(users.c.id.in_(ids))
    )

    result = {}
    for row in rows:
        ref = {"id": row["id"], "name": row["name"], "email": row["email"]}
        if with_role:
            ref["role"] = row["role"]
        result[row["id"]] = ref
    return result


async def clubs_by_id(club_ids: Iterable) -> dict:
    """Map club id -> {id, name}"""
    ids = _ids(club_ids)
    if not ids:
        return {}

    rows = await database.fetch_all(
        select(clubs.c.id, clubs.c.name).where(clubs.c.id.in_(ids))
    )
    return {row["id"]: {"id": row["id"], "name": row["name"]} for row in rows}


async def products_by_id(product_ids: Iterable) -> dict:
    """Map product id -> {id, name, price}"""
    ids = _ids(product_ids)
    if not ids:
        return {}

    rows = await database.fetch_all(
        select(products.c.id, products.c.name, products.c.price).where(products.c.id.in_(ids))
    )
    return {
        row["id"]: {"id": row["id"], "name": row["name"], "price": row["price"]}
        for row in rows
    }
