import itertools
import os
import sys
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Point the app at a throwaway SQLite file before clubify reads its settings
_TMP_DIR = Path(tempfile.mkdtemp(prefix="clubify-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'clubify-test.db'}"
os.environ["SMTP_USER"] = ""
os.environ["SMTP_PASSWORD"] = ""

# Ensure the project is importable when tests run without an install
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from clubify.database import create_tables, database, drop_tables
from clubify.main import app

PASSWORD = "secret123"


@pytest_asyncio.fixture
async def db():
    create_tables()
    await database.connect()
    try:
        yield database
    finally:
        await database.disconnect()
        drop_tables()


@pytest_asyncio.fixture
async def api_client(db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def error_client(db):
    """Client that returns 500 responses instead of re-raising the server error"""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def make_user(api_client):
    """Sign up a user through the API and return it with ready-made headers"""
    counter = itertools.count(1)

    async def _make(role: str = "member", name: str = None):
        n = next(counter)
        payload = {
            "name": name or f"{role.title()} {n}",
            "email": f"{role}{n}@example.com",
            "password": PASSWORD,
            "role": role,
        }
        response = await api_client.post("/api/auth/signup", json=payload)
        assert response.status_code == 201, response.text
        user = response.json()["user"]
        user["headers"] = {"user-id": user["id"]}
        return user

    return _make


@pytest_asyncio.fixture
async def member(make_user):
    return await make_user("member")


@pytest_asyncio.fixture
async def lead(make_user):
    return await make_user("lead")


@pytest_asyncio.fixture
async def board(make_user):
    return await make_user("board")
