"""
Database Connection and Table Metadata
Async queries go through `databases`; table metadata comes from SQLAlchemy
"""

import logging
from datetime import datetime
from uuid import uuid4

from databases import Database
from sqlalchemy import create_engine, MetaData
from sqlalchemy.orm import declarative_base

from clubify.config import settings

logger = logging.getLogger(__name__)

# Database URL
DATABASE_URL = settings.DATABASE_URL

if DATABASE_URL.startswith("sqlite"):
    db_options = {}
else:
    db_options = {"min_size": 1, "max_size": 10}

# Create database instance for async queries
database = Database(DATABASE_URL, **db_options)

# Create SQLAlchemy engine for migrations and table creation
engine = create_engine(
    DATABASE_URL.replace("postgresql://", "postgresql+psycopg2://")
    if "postgresql://" in DATABASE_URL else DATABASE_URL
)

# Metadata for models
metadata = MetaData()

# Base class for models
Base = declarative_base(metadata=metadata)


def new_id() -> str:
    """Generate a new record identifier"""
    return str(uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the format every DateTime column stores"""
    return datetime.utcnow()


def row_to_dict(row, table) -> dict:
    """Convert a fetched record into a plain dict keyed by column name"""
    if row is None:
        return None
    return {column.name: row[column.name] for column in table.columns}


def create_tables():
    """Create every table known to the metadata (development and tests)"""
    import clubify.models  # noqa: F401  registers the tables

    metadata.create_all(bind=engine)


def drop_tables():
    import clubify.models  # noqa: F401

    metadata.drop_all(bind=engine)


async def connect_db():
    """Connect to database on startup"""
    await database.connect()
    logger.info("[OK] Database connected")


async def disconnect_db():
    """Disconnect from database on shutdown"""
    await database.disconnect()
    logger.info("[OK] Database disconnected")
