from dataclasses import dataclass
from enum import Enum

from coachlist.domain.datetime import UtcDatetime


@dataclass(frozen=True)
class WaitlistEntry:
    """
    A single address on the waitlist. The email is always normalized, and the
    creation time is assigned by the store when the entry is inserted.

    Entries written by other tools might not have a (valid) creation time, in
    which case `created_at` is `None`. They still count as being on the list.
    """

    email: str
    created_at: UtcDatetime | None


class EnrollResult(Enum):
    ENROLLED = "ENROLLED"
    ALREADY_ENROLLED = "ALREADY_ENROLLED"
    INVALID = "INVALID"
    STORE_FAILURE = "STORE_FAILURE"
