from abc import ABC, abstractmethod

from coachlist.domain.waitlist import WaitlistEntry


class IWaitlistRepo(ABC):
    """
    The store backing the waitlist. Implementations are not expected to
    enforce uniqueness of emails, and must raise `StoreUnavailable` whenever
    the store cannot be read from or written to.
    """

    @abstractmethod
    async def get_entries_by_email(self, email: str) -> list[WaitlistEntry]:
        ...

    @abstractmethod
    async def insert_entry(self, email: str) -> WaitlistEntry:
        ...
