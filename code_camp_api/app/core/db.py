"""
SQLite database integration and simple migration system.

This module provides ``get_connection`` for obtaining a connection,
``init_db`` for applying migrations on application start and
``seed_db`` for loading a sample camp into an empty database.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: camps and speakers
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS camps (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            moniker TEXT NOT NULL UNIQUE,
            name TEXT NOT NULL,
            description TEXT,
            location TEXT,
            length INTEGER NOT NULL DEFAULT 1,
            event_date TEXT
        );

        CREATE TABLE IF NOT EXISTS speakers (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            camp_id INTEGER NOT NULL,
            name TEXT NOT NULL,
            company_name TEXT,
            phone_number TEXT,
            website_url TEXT,
            twitter_name TEXT,
            github_name TEXT,
            bio TEXT,
            head_shot_url TEXT,
            FOREIGN KEY(camp_id) REFERENCES camps(id) ON DELETE CASCADE
        );

        CREATE INDEX IF NOT EXISTS idx_speakers_camp_id ON speakers(camp_id);
        """,
    ),
]


def resolve_database_path(database_path: str) -> str:
    """Return ``database_path`` as an absolute path (``:memory:`` is kept)."""
    if database_path == ":memory:":
        return database_path
    return str(Path(database_path).expanduser().resolve())


def get_connection(database_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign keys are switched on for every connection; SQLite
    leaves them off by default and the speaker cascade depends on them.
    The connection is not bound to the creating thread because FastAPI
    may finish a request on a different worker thread.
    """
    conn = sqlite3.connect(resolve_database_path(database_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(database_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_path: str) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS``.  Append new migrations with an incremented version.
    """
    with get_cursor(database_path) as cursor:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                current_version = version


def seed_db(database_path: str) -> bool:
    """Insert a sample camp with two speakers if there are no camps yet.

    Returns ``True`` when data was inserted.
    """
    with get_cursor(database_path) as cursor:
        row = cursor.execute("SELECT COUNT(*) AS total FROM camps").fetchone()
        if row["total"]:
            return False
        cursor.execute(
            """
            INSERT INTO camps (moniker, name, description, location, length, event_date)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                "ATL2016",
                "Your First Code Camp",
                "This is the first code camp",
                "Atlanta, GA",
                1,
                "2016-10-18",
            ),
        )
        camp_id = cursor.lastrowid
        cursor.executemany(
            """
            INSERT INTO speakers (camp_id, name, company_name, website_url, twitter_name, github_name, bio)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (camp_id, "Shawn Wildermuth", "Wilder Minds LLC", "http://wildermuth.com",
                 "shawnwildermuth", "shawnwildermuth", "I'm a speaker"),
                (camp_id, "Resa Wildermuth", "Wilder Minds LLC", "http://wildermuth.com",
                 "resawildermuth", "resawildermuth", "I'm a speaker"),
            ],
        )
    logger.info("Seeded sample camp ATL2016")
    return True
