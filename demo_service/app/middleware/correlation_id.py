"""Correlation ID middleware for tracing a request through the logs.

The correlation ID arrives in the ``X-Correlation-ID`` header (or is
generated when absent), is pushed into the logging context so every record
emitted while handling the request carries it, is stored in
``request.state.correlation_id`` and is echoed on the response.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
import uuid

from starlette.datastructures import MutableHeaders

from demo_service.infra.logging.context import remove_from_log_context, set_log_context

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class CorrelationIDMiddleware:
    """Pure ASGI middleware for correlation ID handling.

    This middleware:
    1. Extracts correlation ID from incoming X-Correlation-ID header
    2. Generates new correlation ID if not present (configurable)
    3. Adds correlation ID to response headers
    4. Sets correlation ID in logging context
    5. Stores correlation ID in request.state

    Usage:
        app = FastAPI()
        app.add_middleware(CorrelationIDMiddleware)
    """

    state_key = "correlation_id"
    log_context_key = "correlation_id"

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "x-correlation-id",
        generate_if_missing: bool = True,
    ) -> None:
        """Initialize correlation ID middleware.

        Args:
            app: The ASGI application.
            header_name: HTTP header name for correlation ID (default: x-correlation-id).
            generate_if_missing: Whether to generate correlation ID if not in request.
        """
        self.app = app
        self.header_name = header_name.lower()
        self.generate_if_missing = generate_if_missing

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        # Only process HTTP requests
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        value, was_generated = self._extract_or_generate(scope)

        state = scope.setdefault("state", {})
        state[self.state_key] = value

        if value:
            set_log_context(**{self.log_context_key: value})
            logger.debug(
                "Correlation ID %s",
                "generated" if was_generated else "received from upstream",
                extra={"correlation_id": value},
            )

        async def send_with_correlation_id(message: Message) -> None:
            """Inject correlation ID header into response."""
            if message["type"] == "http.response.start" and value:
                headers = MutableHeaders(scope=message)
                headers.append(self.header_name, value)
            await send(message)

        try:
            await self.app(scope, receive, send_with_correlation_id)
        finally:
            remove_from_log_context(self.log_context_key)

    def _extract_or_generate(self, scope: Scope) -> tuple[str | None, bool]:
        """Extract value from header or generate a new one.

        Returns:
            Tuple of (value, was_generated)
        """
        headers = dict(scope.get("headers", []))
        header_bytes = headers.get(self.header_name.encode("latin-1"))
        if header_bytes:
            return header_bytes.decode("latin-1"), False

        if self.generate_if_missing:
            return str(uuid.uuid4()), True

        return None, False