import sqlite3

from coachlist.api.infra.migrate import migrate
from coachlist.api.settings import DBSettings
from coachlist.domain.datetime import UtcDatetime

sqlite3.register_adapter(UtcDatetime, str)


def get_default_db() -> sqlite3.Connection:
    """
    Open (and migrate) the database at `DB_URL`. The connection is shared
    between requests, which run its queries in worker threads.
    """

    db = sqlite3.connect(DBSettings().db_url, check_same_thread=False)
    migrate(db)

    return db


class DbConnection:
    conn: sqlite3.Connection

    def __init__(self, db: sqlite3.Connection | None = None) -> None:
        self.conn = get_default_db() if db is None else db

        self.conn.row_factory = sqlite3.Row

    def close(self) -> None:
        self.conn.close()
