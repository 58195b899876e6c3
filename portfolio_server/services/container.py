from typing import Dict, Type, TypeVar
from .url_validator import URLValidator, URLValidatorInterface
from .web_fetcher import WebFetcher, WebFetcherInterface
from .platform_detector import PlatformDetector, PlatformDetectorInterface
from .metadata_extractor import MetadataExtractor, MetadataExtractorInterface
from .cache_service import MetadataCache, CacheInterface
from .metadata_fetcher import MetadataFetcher
from .metadata_service import MetadataService
from portfolio_server.core.config import settings

T = TypeVar('T')


class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self, cache: CacheInterface = None, web_fetcher: WebFetcherInterface = None):
        self._services: Dict[Type, object] = {}

        # Register services in dependency order
        self._register_services(cache, web_fetcher)

    def _register_services(self, cache: CacheInterface, web_fetcher: WebFetcherInterface) -> None:
        """Register all services with proper dependency injection"""
        self._services[URLValidatorInterface] = URLValidator(
            block_private_hosts=settings.fetch_block_private_hosts
        )
        self._services[PlatformDetectorInterface] = PlatformDetector()
        self._services[MetadataExtractorInterface] = MetadataExtractor()

        # Services with dependencies
        self._services[WebFetcherInterface] = web_fetcher or WebFetcher(
            self._services[URLValidatorInterface]
        )
        # One cache per process, shared by every request through this container
        self._services[CacheInterface] = cache or MetadataCache()

        self._services[MetadataFetcher] = MetadataFetcher(
            self._services[URLValidatorInterface],
            self._services[WebFetcherInterface],
            self._services[MetadataExtractorInterface],
            self._services[PlatformDetectorInterface],
        )

        # Main service that depends on others
        self._services[MetadataService] = MetadataService(
            self._services[MetadataFetcher],
            self._services[CacheInterface],
        )

    def get_metadata_service(self) -> MetadataService:
        """Get the metadata service instance"""
        return self._services[MetadataService]  # type: ignore

    def get_service(self, interface: Type[T]) -> T:
        """Generic method to retrieve a service by its interface"""
        service = self._services.get(interface)
        if service is None:
            raise ValueError(f"Service for interface {interface.__name__} not found")
        return service  # type: ignore
