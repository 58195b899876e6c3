import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional
from cachetools import TTLCache
from portfolio_server.core.models import UrlMetadata

# Import settings
from portfolio_server.core.config import settings

logger = logging.getLogger(__name__)


class CacheInterface(ABC):
    """Interface for caching following the Dependency Inversion Principle"""

    @abstractmethod
    def get(self, key: str) -> Optional[UrlMetadata]:
        """
        Get metadata from cache.

        Args:
            key: The requested URL, exactly as given

        Returns:
            The cached UrlMetadata if present and not expired, None otherwise
        """
        pass

    @abstractmethod
    def set(self, key: str, value: UrlMetadata) -> None:
        """
        Set metadata in cache.

        Args:
            key: The requested URL, exactly as given
            value: The UrlMetadata to cache
        """
        pass


class MetadataCache(CacheInterface):
    """
    TTL cache for metadata with configurable size, TTL and clock.

    Keys are not normalized, so equivalent URL spellings are separate entries.
    Expired entries are dropped when they are next looked up; the least
    recently used entry is evicted once maxsize is reached.
    """

    def __init__(
        self,
        maxsize: int = None,
        ttl: float = None,
        timer: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            maxsize: Maximum number of items to cache (uses config default if None)
            ttl: Time to live in seconds (uses config default if None)
            timer: Clock returning seconds; tests pass a fake one
        """
        if maxsize is None:
            maxsize = settings.cache_maxsize
        if ttl is None:
            ttl = settings.cache_ttl_seconds

        self.cache: TTLCache[str, UrlMetadata] = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)

    def get(self, key: str) -> Optional[UrlMetadata]:
        cached_item = self.cache.get(key)
        if cached_item is not None:
            logger.debug(f"Cache hit for key: {key}")
        else:
            logger.debug(f"Cache miss for key: {key}")
        return cached_item

    def set(self, key: str, value: UrlMetadata) -> None:
        logger.debug(f"Storing metadata in cache for key: {key}")
        self.cache[key] = value

    def clear(self) -> None:
        self.cache.clear()

    def __len__(self) -> int:
        return len(self.cache)
