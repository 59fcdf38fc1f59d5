#!/usr/bin/env python
"""Create the database from `DATABASE_URL` in .env and all Clubify tables.

For PostgreSQL the database itself is created first when missing. SQLite
files are created on first connect.

Usage:
  python scripts/create_database.py [--password PW]
"""
import argparse
import logging
import os
import sys
from getpass import getpass

# Ensure project root is on sys.path so `clubify` package can be imported
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import psycopg2
from psycopg2 import sql
from psycopg2 import OperationalError
from sqlalchemy.engine import make_url

from clubify.config import settings
from clubify.database import create_tables
from clubify.logging_config import configure_logging

logger = logging.getLogger("create_database")


def ensure_postgres_database(url, password):
    def try_connect(pw):
        return psycopg2.connect(
            dbname="postgres",
            user=url.username,
            password=pw,
            host=url.host or "localhost",
            port=url.port or 5432,
        )

    try:
        conn = try_connect(password)
    except OperationalError:
        if not sys.stdin.isatty():
            logger.error("Password authentication failed. Provide it via --password or POSTGRES_PASSWORD.")
            sys.exit(1)
        print("Password authentication failed. Please enter the Postgres password for user:", url.username)
        conn = try_connect(getpass())

    conn.autocommit = True
    try:
        cur = conn.cursor()
        cur.execute("SELECT 1 FROM pg_database WHERE datname=%s", (url.database,))
        if cur.fetchone():
            logger.info("Database '%s' already exists.", url.database)
        else:
            cur.execute(sql.SQL("CREATE DATABASE {};").format(sql.Identifier(url.database)))
            logger.info("Database '%s' created.", url.database)
        cur.close()
    finally:
        conn.close()


def main():
    configure_logging()
    parser = argparse.ArgumentParser()
    parser.add_argument("--password", "-p", help="Postgres admin password")
    args = parser.parse_args()

    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "postgresql":
        if not url.database:
            logger.error("No database name found in DATABASE_URL")
            sys.exit(1)
        ensure_postgres_database(url, args.password or os.getenv("POSTGRES_PASSWORD") or url.password)

    create_tables()
    logger.info("Tables created for %s", url.render_as_string(hide_password=True))


if __name__ == "__main__":
    main()
