"""Health check feature."""

from __future__ import annotations

from demo_service.features.health.router import router

__all__ = ["router"]
