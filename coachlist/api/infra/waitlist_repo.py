import asyncio
import sqlite3

from coachlist.api.infra.db_connection import DbConnection
from coachlist.application.exceptions import StoreUnavailable
from coachlist.domain.datetime import UtcDatetime
from coachlist.domain.repo.waitlist_repo import IWaitlistRepo
from coachlist.domain.waitlist import WaitlistEntry


class WaitlistRepo(IWaitlistRepo, DbConnection):
    """
    SQLite backed waitlist. Queries run in a worker thread so they don't block
    the event loop, one at a time since they share a single connection.
    """

    def __init__(self, db: sqlite3.Connection | None = None) -> None:
        super().__init__(db)

        self.lock = asyncio.Lock()

    async def get_entries_by_email(self, email: str) -> list[WaitlistEntry]:
        async with self.lock:
            try:
                rows = await asyncio.to_thread(self._select_by_email, email)

            except sqlite3.Error as ex:
                raise StoreUnavailable("Could not query waitlist") from ex

        return [
            WaitlistEntry(
                email=row["email"],
                created_at=UtcDatetime.fromisoformat(row["created_at"]),
            )
            for row in rows
        ]

    async def insert_entry(self, email: str) -> WaitlistEntry:
        entry = WaitlistEntry(email=email, created_at=UtcDatetime.now())

        async with self.lock:
            try:
                await asyncio.to_thread(self._insert, entry)

            except sqlite3.Error as ex:
                raise StoreUnavailable("Could not insert into waitlist") from ex

        return entry

    def _select_by_email(self, email: str) -> list[sqlite3.Row]:
        return (
            self.conn.cursor()
            .execute(
                "SELECT email, created_at FROM waitlist WHERE email = ?;",
                [email],
            )
            .fetchall()
        )

    def _insert(self, entry: WaitlistEntry) -> None:
        self.conn.cursor().execute(
            "INSERT INTO waitlist (email, created_at) VALUES (?, ?);",
            [entry.email, entry.created_at],
        )

        self.conn.commit()
