"""
Schema migrations for the SQLite waitlist store. The schema version is kept in
SQLite's built-in `user_version` pragma, and each entry in `MIGRATIONS` moves
the schema up by one version.
"""

import logging
import sqlite3
from typing import Final

MIGRATIONS: Final = (
    # v1: emails are intentionally not UNIQUE. Duplicates are checked for
    # before inserting, which is all the waitlist store is required to do.
    """
    CREATE TABLE waitlist (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        email TEXT NOT NULL,
        created_at TEXT NOT NULL
    );

    CREATE INDEX ix_waitlist_email ON waitlist(email);
    """,
)


def get_version(db: sqlite3.Connection) -> int:
    return int(db.execute("PRAGMA user_version;").fetchone()[0])


def migrate(db: sqlite3.Connection) -> None:
    current_version = get_version(db)

    if current_version > len(MIGRATIONS):
        raise ValueError(
            f"Database is at version {current_version}, which is newer than this version of coachlist supports ({len(MIGRATIONS)})"  # noqa: E501
        )

    logger = logging.getLogger("coachlist")

    for version, script in enumerate(
        MIGRATIONS[current_version:], start=current_version + 1
    ):
        logger.info("Migrating waitlist database to version %d", version)

        db.executescript(script)
        db.execute(f"PRAGMA user_version = {version};")
        db.commit()
