"""
FastAPI dependencies for dependency injection.

This module provides the singleton URL store that is injected into
services and routes. Tests override get_url_store to get a fresh store.
"""

from functools import lru_cache

from fastapi import Depends

from shortener_app.services.url_service import URLService
from shortener_app.storage.strategies import URLStoreStrategy, InMemoryURLStore


@lru_cache()
def get_url_store() -> URLStoreStrategy:
    """
    Get URL store instance (singleton).

    @lru_cache ensures one store is shared by every request in the process.
    """
    return InMemoryURLStore()


def get_url_service(store: URLStoreStrategy = Depends(get_url_store)) -> URLService:
    """Get URLService with the store injected"""
    return URLService(store=store)
