"""
URL store strategies using Strategy Pattern.

The store holds the short_code -> original URL mapping. Request handlers
run in FastAPI's threadpool, so implementations must be safe to call
from several threads at once.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class URLStoreStrategy(ABC):
    """
    Abstract base class for URL stores.

    Injected into URLService via shortener_app.dependencies, so tests
    can swap in a fresh store per test.
    """

    @abstractmethod
    def save(self, short_code: str, original: str) -> None:
        """
        Store a mapping. An existing short_code is overwritten (last write wins).

        Args:
            short_code: Generated short code
            original: Original URL, stored as given
        """
        pass

    @abstractmethod
    def get(self, short_code: str) -> Optional[str]:
        """
        Look up the original URL.

        Returns:
            Original URL or None if short_code is unknown
        """
        pass

    @abstractmethod
    def exists(self, short_code: str) -> bool:
        """Check if short_code is stored"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored mappings"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all mappings"""
        pass


class InMemoryURLStore(URLStoreStrategy):
    """
    In-memory store backed by a dict and guarded by a mutex.

    Pros:
    - Very fast (no network overhead)
    - No external dependencies

    Cons:
    - Not distributed (each process has its own map)
    - Lost on restart
    """

    def __init__(self):
        self._urls: Dict[str, str] = {}
        self._lock = threading.Lock()

    def save(self, short_code: str, original: str) -> None:
        with self._lock:
            if short_code in self._urls:
                logger.warning("Overwriting existing short code %s", short_code)
            self._urls[short_code] = original

    def get(self, short_code: str) -> Optional[str]:
        with self._lock:
            return self._urls.get(short_code)

    def exists(self, short_code: str) -> bool:
        with self._lock:
            return short_code in self._urls

    def count(self) -> int:
        with self._lock:
            return len(self._urls)

    def clear(self) -> None:
        with self._lock:
            self._urls.clear()
