from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import FastAPI, Form
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from coachlist.api.di import DiContainer
from coachlist.api.endpoints.di import Di
from coachlist.api.middleware import SlowRequestMiddleware
from coachlist.domain.enrollment import EnrollmentState, Failed, FailureReason


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield

    await DiContainer.close()


app = FastAPI(
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
)
app.add_middleware(SlowRequestMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=512)


FAILURE_STATUS_CODES = {
    FailureReason.INVALID_EMAIL: 400,
    FailureReason.ALREADY_ENROLLED: 409,
    FailureReason.STORE_FAILURE: 503,
}


def state_to_response(state: EnrollmentState) -> JSONResponse:
    """
    Render the state of a finished submission, which is either succeeded or
    failed: the controller never returns from `submit()` while submitting.
    """

    phase = state.phase
    reason = phase.reason if isinstance(phase, Failed) else None

    return JSONResponse(
        {
            "phase": phase.name,
            "reason": reason.value if reason is not None else None,
            "message": phase.message,
        },
        status_code=200 if reason is None else FAILURE_STATUS_CODES[reason],
    )


@app.post("/api/join_waitlist")
async def join_waitlist(
    di: Di, email: Annotated[str, Form()] = ""
) -> JSONResponse:
    """
    Each request is treated as its own page visit, so a fresh controller is
    used every time and the final state of the form is sent back.
    """

    controller = di.enrollment_controller()

    return state_to_response(await controller.submit(email))
