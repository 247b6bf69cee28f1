import asyncio
import sqlite3
from unittest.mock import MagicMock

import pytest

from coachlist.api.infra.migrate import migrate
from coachlist.api.infra.waitlist_repo import WaitlistRepo
from coachlist.application.exceptions import StoreUnavailable
from coachlist.domain.datetime import UtcDatetime
from test.api.common import SqliteTestWrapper


class TestWaitlistRepo(SqliteTestWrapper):
    repo: WaitlistRepo

    @classmethod
    def setup_class(cls) -> None:
        cls.reset()

    @classmethod
    def reset(cls) -> None:
        super().reset()

        cls.repo = WaitlistRepo(cls.connection)

    def setup_method(self) -> None:
        self.reset()

    async def test_inserted_entry_can_be_queried_by_email(self) -> None:
        now = UtcDatetime.now()

        entry = await self.repo.insert_entry("hello@world.com")

        assert entry.email == "hello@world.com"
        assert entry.created_at >= now

        entries = await self.repo.get_entries_by_email("hello@world.com")

        assert entries == [entry]
        assert isinstance(entries[0].created_at, UtcDatetime)

    async def test_query_only_returns_exact_matches(self) -> None:
        await self.repo.insert_entry("hello@world.com")
        await self.repo.insert_entry("other@world.com")

        assert not await self.repo.get_entries_by_email("world.com")
        assert not await self.repo.get_entries_by_email("HELLO@world.com")

        entries = await self.repo.get_entries_by_email("other@world.com")

        assert [e.email for e in entries] == ["other@world.com"]

    async def test_store_does_not_enforce_unique_emails(self) -> None:
        await self.repo.insert_entry("hello@world.com")
        await self.repo.insert_entry("hello@world.com")

        entries = await self.repo.get_entries_by_email("hello@world.com")

        assert len(entries) == 2


async def test_sqlite_errors_are_converted_to_store_unavailable() -> None:
    db = MagicMock()
    db.cursor.return_value.execute.side_effect = sqlite3.OperationalError(
        "database is locked"
    )

    repo = WaitlistRepo(db)

    with pytest.raises(StoreUnavailable, match="Could not query waitlist"):
        await repo.get_entries_by_email("hello@world.com")

    with pytest.raises(StoreUnavailable, match="Could not insert"):
        await repo.insert_entry("hello@world.com")


async def test_missing_table_is_reported_as_store_unavailable() -> None:
    repo = WaitlistRepo(sqlite3.connect(":memory:", check_same_thread=False))

    with pytest.raises(StoreUnavailable):
        await repo.get_entries_by_email("hello@world.com")


async def test_concurrent_queries_share_one_connection() -> None:
    db = sqlite3.connect(":memory:", check_same_thread=False)
    migrate(db)

    repo = WaitlistRepo(db)

    emails = [f"coach{i}@example.com" for i in range(10)]

    await asyncio.gather(*(repo.insert_entry(email) for email in emails))

    results = await asyncio.gather(
        *(repo.get_entries_by_email(email) for email in emails)
    )

    assert [[e.email for e in entries] for entries in results] == [
        [email] for email in emails
    ]
