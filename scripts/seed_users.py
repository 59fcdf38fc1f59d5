"""
Seed one account per role plus the default club for local testing
"""

import sys
import asyncio
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from sqlalchemy import select

from clubify.auth import hash_password
from clubify.database import database, connect_db, disconnect_db, new_id, utcnow
from clubify.logging_config import configure_logging
from clubify.models import User
from clubify.services.club_service import club_service

DEFAULT_PASSWORD = "password123"

ACCOUNTS = [
    {"name": "Board Member", "email": "board@clubify.com", "role": "board"},
    {"name": "Club Lead", "email": "lead@clubify.com", "role": "lead"},
    {"name": "Club Member", "email": "member@clubify.com", "role": "member"},
]

users = User.__table__


async def seed_users():
    configure_logging()
    await connect_db()

    try:
        board = None
        for account in ACCOUNTS:
            existing = await database.fetch_one(select(users.c.id).where(users.c.email == account["email"]))
            if existing:
                print(f"= {account['email']} already exists")
                user_id = existing["id"]
            else:
                now = utcnow()
                user_id = new_id()
                await database.execute(users.insert().values(
                    id=user_id,
                    name=account["name"],
                    email=account["email"],
                    password_hash=hash_password(DEFAULT_PASSWORD),
                    role=account["role"],
                    is_active=True,
                    created_at=now,
                    updated_at=now,
                ))
                print(f"+ {account['email']} ({account['role']})")
            if account["role"] == "board":
                board = {"id": user_id, "role": "board", "name": account["name"], "email": account["email"]}

        club = await club_service.ensure_default_club(admin=board)
        print(f"Default club: {club['name']} ({club['id']})")
        print(f"Password for every seeded account: {DEFAULT_PASSWORD}")

    finally:
        await disconnect_db()


if __name__ == "__main__":
    asyncio.run(seed_users())
