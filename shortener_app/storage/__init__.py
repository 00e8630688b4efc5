"""
Storage module for URL shortener.
Implements Strategy Pattern for the short code -> URL mapping store.
"""

from .strategies import URLStoreStrategy, InMemoryURLStore

__all__ = [
    "URLStoreStrategy",
    "InMemoryURLStore",
]
