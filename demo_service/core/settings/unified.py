"""Unified settings composition for convenient access.

Usage:
    from demo_service.core.settings import get_settings

    settings = get_settings()
    print(settings.app.port)
    print(settings.graphql.path)

Each nested settings class still respects its own env prefix. Code that only
needs one domain should prefer the individual get_*_settings() loaders.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .app import AppSettings
from .graphql import GraphQLSettings
from .loader import get_app_settings, get_graphql_settings, get_logging_settings
from .logs import LoggingSettings


@dataclass(frozen=True)
class Settings:
    """All settings domains behind one object."""

    app: AppSettings
    graphql: GraphQLSettings
    logging: LoggingSettings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached unified settings built from the per-domain loaders."""
    return Settings(
        app=get_app_settings(),
        graphql=get_graphql_settings(),
        logging=get_logging_settings(),
    )


def clear_all_settings_caches() -> None:
    """Clear every cached settings instance (tests and reloads)."""
    get_app_settings.cache_clear()
    get_graphql_settings.cache_clear()
    get_logging_settings.cache_clear()
    get_settings.cache_clear()
