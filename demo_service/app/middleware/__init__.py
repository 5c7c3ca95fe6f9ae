"""HTTP middleware."""

from __future__ import annotations

from typing import TYPE_CHECKING

from demo_service.app.middleware.correlation_id import CorrelationIDMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI


def configure_middleware(app: FastAPI) -> None:
    """Register middleware on the application."""
    app.add_middleware(CorrelationIDMiddleware)


__all__ = ["CorrelationIDMiddleware", "configure_middleware"]
