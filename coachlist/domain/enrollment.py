from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class FailureReason(Enum):
    ALREADY_ENROLLED = "already on waitlist"
    INVALID_EMAIL = "invalid email format"
    STORE_FAILURE = "transient error, retry later"

    @property
    def message(self) -> str:
        return FAILURE_MESSAGES[self]


FAILURE_MESSAGES = {
    FailureReason.ALREADY_ENROLLED: (
        "This email is already on our waitlist. Thank you for your interest!"
    ),
    FailureReason.INVALID_EMAIL: "Please enter a valid email address.",
    FailureReason.STORE_FAILURE: (
        "Something went wrong. Please try again later."
    ),
}


@dataclass(frozen=True)
class Idle:
    name: ClassVar[str] = "idle"

    @property
    def message(self) -> str:
        return ""


@dataclass(frozen=True)
class Submitting:
    name: ClassVar[str] = "submitting"

    @property
    def message(self) -> str:
        return ""


@dataclass(frozen=True)
class Succeeded:
    name: ClassVar[str] = "succeeded"

    @property
    def message(self) -> str:
        return "You're on the list! We'll keep you posted."


@dataclass(frozen=True)
class Failed:
    reason: FailureReason

    name: ClassVar[str] = "failed"

    @property
    def message(self) -> str:
        return self.reason.message


EnrollmentPhase = Idle | Submitting | Succeeded | Failed


@dataclass
class EnrollmentState:
    """
    The state of the waitlist form for a single page visit. This is never
    persisted: it starts off idle and is thrown away when the page goes away.
    """

    phase: EnrollmentPhase = field(default_factory=Idle)
    input_email: str = ""

    def can_edit(self) -> bool:
        """
        The input can only be edited before submitting, or after a failed
        submission. Once the email is on the waitlist the form is read-only.
        """

        return isinstance(self.phase, Idle | Failed)

    def can_submit(self) -> bool:
        return self.can_edit()
