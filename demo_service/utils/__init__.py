"""Shared utilities."""

from demo_service.utils.batching import BatchLoader

__all__ = ["BatchLoader"]
