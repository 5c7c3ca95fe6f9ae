"""Modular Pydantic Settings v2 configuration.

Settings follow 12-factor principles:
- Single source of truth via environment variables (or a local .env file)
- Modular settings by domain (app/graphql/logging)
- LRU-cached settings loaders
- Immutable (frozen) settings models

Import settings via cached loaders:
    from demo_service.core.settings import get_app_settings

Or use unified settings for convenient access to all domains:
    from demo_service.core.settings import get_settings

    settings = get_settings()
    print(settings.app.host)
"""

from __future__ import annotations

from .loader import (
    get_app_settings,
    get_graphql_settings,
    get_logging_settings,
)
from .unified import Settings, clear_all_settings_caches, get_settings

__all__ = [
    "Settings",
    "clear_all_settings_caches",
    "get_app_settings",
    "get_graphql_settings",
    "get_logging_settings",
    "get_settings",
]
