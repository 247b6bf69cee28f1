import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send


class SlowRequestMiddleware:
    """
    Log a warning for HTTP requests which take longer than `threshold` seconds
    to respond, along with the status code that was sent back. A slow join
    request usually means the waitlist store is struggling.
    """

    def __init__(self, app: ASGIApp, threshold: float = 1.5) -> None:
        self.app = app
        self.threshold = threshold
        self.logger = logging.getLogger("coachlist")

    async def __call__(
        self, scope: Scope, receive: Receive, send: Send
    ) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        status = 0

        async def capture_status(message: Message) -> None:
            nonlocal status

            if message["type"] == "http.response.start":
                status = message["status"]

            await send(message)

        start = time.monotonic()

        try:
            await self.app(scope, receive, capture_status)

        finally:
            elapsed = time.monotonic() - start

            if elapsed > self.threshold:
                self.logger.warning(
                    "%s %s took %.2f seconds (status %s)",
                    scope.get("method", "?"),
                    scope.get("path", "<unknown>"),
                    elapsed,
                    status or "not sent",
                )
