import logging
from typing import Optional

from shortener_app.schemas.url import URLPair
from shortener_app.services.short_code_factory import ShortCodeFactory
from shortener_app.services.short_code_strategies import ShortCodeStrategy
from shortener_app.storage.strategies import URLStoreStrategy

logger = logging.getLogger(__name__)


class URLService:
    """
    URL Service with dependency injection for the URL store.

    - The store is injected (not created internally)
    - Easy to test (inject a fresh store)
    - Short code strategy defaults to the one configured in settings
    """

    def __init__(
        self,
        store: URLStoreStrategy,
        short_code_strategy: Optional[ShortCodeStrategy] = None
    ):
        self.store = store
        # Use provided strategy or create default from factory
        self.short_code_strategy = short_code_strategy or ShortCodeFactory.create_strategy()

    def create_short_url(self, original: str) -> URLPair:
        """Create a new short URL

        Always generates a new code, even if `original` was shortened before.
        There is no collision check: a repeated code replaces the older entry.
        """
        short_code = self.short_code_strategy.generate()
        self.store.save(short_code, original)
        logger.info("Shortened %s to %s", original, short_code)
        return URLPair(original=original, short_code=short_code)

    def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the original URL for redirection, or None if unknown"""
        if not short_code:
            return None
        return self.store.get(short_code)
