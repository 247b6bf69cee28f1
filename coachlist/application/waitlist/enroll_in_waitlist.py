import logging

from coachlist.application.exceptions import StoreUnavailable
from coachlist.domain.email import is_valid_email, normalize_email
from coachlist.domain.repo.waitlist_repo import IWaitlistRepo
from coachlist.domain.waitlist import EnrollResult


class EnrollInWaitlist:
    """
    Add an email to the waitlist if it isn't on there already. Every outcome,
    including store failures, is returned as an `EnrollResult` instead of being
    raised, and nothing is retried: it is up to the caller to try again.

    Checking for an existing entry and inserting the new one are two separate
    round trips to the store, so two concurrent enrollments of the same email
    can both end up being inserted. If the store ever supports unique keys,
    this should be replaced with a single conditional insert.
    """

    def __init__(self, waitlist_repo: IWaitlistRepo) -> None:
        self.waitlist_repo = waitlist_repo
        self.logger = logging.getLogger("coachlist")

    async def handle(self, raw_email: str) -> EnrollResult:
        email = normalize_email(raw_email)

        if not is_valid_email(email):
            return EnrollResult.INVALID

        try:
            if await self.waitlist_repo.get_entries_by_email(email):
                return EnrollResult.ALREADY_ENROLLED

            await self.waitlist_repo.insert_entry(email)

        except StoreUnavailable:
            self.logger.warning(
                "Could not add email to waitlist", exc_info=True
            )

            return EnrollResult.STORE_FAILURE

        finally:
            self.logger.info("Email submission processed")

        return EnrollResult.ENROLLED
