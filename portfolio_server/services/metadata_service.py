import logging
from typing import Optional
from .metadata_fetcher import MetadataFetcher
from .cache_service import CacheInterface
from portfolio_server.core.models import UrlMetadata

logger = logging.getLogger(__name__)


class MetadataService:
    """
    Main service for metadata operations: the metadata fetcher behind an
    optional cache
    """

    def __init__(self, fetcher: MetadataFetcher, cache: Optional[CacheInterface] = None):
        self.fetcher = fetcher
        self.cache = cache

    async def get_metadata(self, url: str) -> UrlMetadata:
        """
        Get metadata for a URL with caching.

        Fallback records are cached like live ones so a dead or blocking site
        is not hit again until the entry expires. Concurrent misses for the
        same URL each fetch on their own.

        Args:
            url: The URL to extract metadata from

        Returns:
            UrlMetadata for the URL; never raises for extraction failures
        """
        if self.cache is not None:
            cached_data = self.cache.get(url)
            if cached_data is not None:
                logger.info(f"Metadata retrieved from cache for URL: {url}")
                return cached_data

        metadata = await self.fetcher.fetch(url)

        if self.cache is not None:
            self.cache.set(url, metadata)
            logger.info(f"Metadata ({metadata.source}) cached for URL: {url}")

        return metadata

    def build_fallback(self, url: str) -> UrlMetadata:
        return self.fetcher.build_fallback(url)
