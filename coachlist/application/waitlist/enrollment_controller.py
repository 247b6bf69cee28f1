import logging
from collections.abc import Awaitable, Callable

from coachlist.domain.enrollment import (
    EnrollmentState,
    Failed,
    FailureReason,
    Submitting,
    Succeeded,
)
from coachlist.domain.waitlist import EnrollResult

Enroller = Callable[[str], Awaitable[EnrollResult]]
StateListener = Callable[[EnrollmentState], None]

FAILURE_REASONS = {
    EnrollResult.ALREADY_ENROLLED: FailureReason.ALREADY_ENROLLED,
    EnrollResult.INVALID: FailureReason.INVALID_EMAIL,
    EnrollResult.STORE_FAILURE: FailureReason.STORE_FAILURE,
}


class EnrollmentController:
    """
    Drives the waitlist form for a single page visit:

    idle -> submitting -> succeeded | failed(reason)

    Submitting again is allowed after a failure, but not after succeeding.
    While a submission is in flight any other submissions are ignored, so at
    most one enrollment is running at a time. There are no timeouts and no
    cancellation: once submitted, the enrollment runs to completion.
    """

    def __init__(self, enroll: Enroller) -> None:
        self.enroll = enroll
        self.state = EnrollmentState()
        self.listeners: list[StateListener] = []
        self.logger = logging.getLogger("coachlist")

    def subscribe(self, listener: StateListener) -> None:
        self.listeners.append(listener)

    def set_input(self, raw_email: str) -> None:
        if not self.state.can_edit():
            return

        self.state.input_email = raw_email
        self._notify()

    async def submit(self, raw_email: str | None = None) -> EnrollmentState:
        if not self.state.can_submit():
            self.logger.debug(
                "Ignoring submission while %s", self.state.phase.name
            )

            return self.state

        if raw_email is not None:
            self.state.input_email = raw_email

        self._transition(Submitting())

        try:
            result = await self.enroll(self.state.input_email)

        except Exception:
            # The form must never get stuck in the submitting state
            self.logger.exception("Unexpected error while enrolling email")

            result = EnrollResult.STORE_FAILURE

        if result == EnrollResult.ENROLLED:
            self._transition(Succeeded())

        else:
            self._transition(Failed(FAILURE_REASONS[result]))

        return self.state

    def _transition(self, phase: Submitting | Succeeded | Failed) -> None:
        self.state.phase = phase
        self._notify()

    def _notify(self) -> None:
        for listener in self.listeners:
            listener(self.state)
