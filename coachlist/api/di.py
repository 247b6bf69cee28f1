import logging

from coachlist.api.infra.firestore_waitlist_repo import FirestoreWaitlistRepo
from coachlist.api.infra.waitlist_repo import WaitlistRepo
from coachlist.api.settings import WaitlistStoreSettings
from coachlist.application.waitlist.enroll_in_waitlist import EnrollInWaitlist
from coachlist.application.waitlist.enrollment_controller import (
    EnrollmentController,
)
from coachlist.domain.repo.waitlist_repo import IWaitlistRepo

logger = logging.getLogger("coachlist")


class DiContainer:
    # Stores are created once and shared between requests
    sqlite_repo: WaitlistRepo | None = None
    firestore_repo: FirestoreWaitlistRepo | None = None

    @classmethod
    def waitlist_repo(cls) -> IWaitlistRepo:
        if WaitlistStoreSettings().store == "firestore":
            if cls.firestore_repo is None:
                logger.info("Using Firestore as the waitlist store")

                cls.firestore_repo = FirestoreWaitlistRepo()

            return cls.firestore_repo

        if cls.sqlite_repo is None:
            logger.info("Using SQLite as the waitlist store")

            cls.sqlite_repo = WaitlistRepo()

        return cls.sqlite_repo

    @classmethod
    def enrollment_controller(cls) -> EnrollmentController:
        return EnrollmentController(EnrollInWaitlist(cls.waitlist_repo()).handle)

    @classmethod
    async def close(cls) -> None:
        if cls.sqlite_repo:
            cls.sqlite_repo.close()
            cls.sqlite_repo = None

        if cls.firestore_repo:
            await cls.firestore_repo.client.aclose()
            cls.firestore_repo = None
