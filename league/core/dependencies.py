"""
Dependency injection for FastAPI endpoints.
"""
from functools import lru_cache

from league.core.config import settings
from league.core.store import StateStore
from league.services.storage import GameDataStorage


@lru_cache()
def get_store() -> StateStore:
    """
    Create and cache the single StateStore.

    Every request shares this instance, which is what makes it the single
    writer; tests swap it out through ``app.dependency_overrides``.
    """
    return StateStore(betting_window=settings.betting_window)


@lru_cache()
def get_storage() -> GameDataStorage:
    """Create and cache the snapshot storage service."""
    return GameDataStorage(settings.DATA_FILE)
