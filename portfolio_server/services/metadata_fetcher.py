import logging
from typing import Optional
from urllib.parse import urlsplit

from .url_validator import URLValidatorInterface
from .web_fetcher import WebFetcherInterface
from .metadata_extractor import MetadataExtractorInterface
from .platform_detector import PlatformDetectorInterface
from .knowledge_base import github_repository_preview, is_known_site, lookup_fallback_hint, lookup_site
from .url_variants import generate_url_variants, get_domain, get_favicon_url
from portfolio_server.core.models import (
    DEFAULT_TYPE,
    SOURCE_FALLBACK,
    SOURCE_LIVE,
    PageMetadata,
    UrlMetadata,
)

logger = logging.getLogger(__name__)

UNTITLED_LINK = "Untitled link"


class MetadataFetcher:
    """
    Resolves a URL into UrlMetadata.

    Each URL variant is fetched and parsed in turn, stopping at the first one
    that yields usable metadata. When every variant fails the record is built
    from the fallback knowledge base instead. fetch() never raises.
    """

    def __init__(
        self,
        url_validator: URLValidatorInterface,
        web_fetcher: WebFetcherInterface,
        metadata_extractor: MetadataExtractorInterface,
        platform_detector: PlatformDetectorInterface,
    ):
        self.url_validator = url_validator
        self.web_fetcher = web_fetcher
        self.metadata_extractor = metadata_extractor
        self.platform_detector = platform_detector

    async def fetch(self, target_url: str) -> UrlMetadata:
        """
        Get link preview metadata for a URL.

        Args:
            target_url: The URL exactly as requested; it is echoed back in the result

        Returns:
            A live record from the first usable variant, otherwise a fallback record
        """
        if not self.url_validator.is_absolute_url(target_url):
            logger.warning(f"Malformed URL, skipping extraction: {target_url!r}")
            return self.build_fallback(target_url)

        variants = generate_url_variants(target_url)
        logger.info(f"Extracting metadata for {target_url} ({len(variants)} variants)")

        for variant in variants:
            try:
                page_metadata = await self._try_variant(variant)
            except Exception as e:
                logger.error(f"Unexpected error extracting variant {variant}: {str(e)}", exc_info=True)
                continue

            if page_metadata is not None:
                logger.info(f"Extracted metadata for {target_url} from variant {variant}")
                return self._build_live(target_url, page_metadata)

        logger.warning(f"All {len(variants)} variants failed for {target_url}, using fallback metadata")
        return self.build_fallback(target_url)

    async def _try_variant(self, variant: str) -> Optional[PageMetadata]:
        fetched = await self.web_fetcher.fetch_html(variant)
        if not fetched.ok:
            logger.warning(f"Fetch failed for variant {variant}: [{fetched.error_code}] {fetched.message}")
            return None

        page = fetched.value
        parsed = self.metadata_extractor.extract(page.content, page.url, page.encoding)
        if not parsed.ok:
            logger.info(f"No usable metadata from variant {variant}: [{parsed.error_code}] {parsed.message}")
            return None

        return parsed.value

    def _platform_type(self, domain: str) -> Optional[str]:
        platform = self.platform_detector.detect_platform(domain)
        return platform.type if platform else None

    def _build_live(self, target_url: str, page: PageMetadata) -> UrlMetadata:
        domain = get_domain(target_url)

        content_type = page.type or DEFAULT_TYPE
        if content_type == DEFAULT_TYPE:
            content_type = self._platform_type(domain) or DEFAULT_TYPE

        return UrlMetadata(
            title=page.title or f"Visit {domain}",
            description=page.description,
            image=page.image,
            url=target_url,
            domain=domain,
            favicon=get_favicon_url(target_url),
            site_name=page.site_name or domain,
            type=content_type,
            author=page.author,
            published_time=page.published_time,
            modified_time=page.modified_time,
            tags=page.tags,
            source=SOURCE_LIVE,
        )

    def build_fallback(self, target_url: str) -> UrlMetadata:
        """Synthetic record that needs no network access; always succeeds"""
        domain = get_domain(target_url) if target_url else ""

        if not domain:
            # Nothing to derive a site from, so the raw string stands in
            label = (target_url or "").strip() or UNTITLED_LINK
            return UrlMetadata(
                title=label,
                description="",
                image="",
                url=target_url or "",
                domain="",
                favicon="",
                site_name=label,
                type=DEFAULT_TYPE,
                source=SOURCE_FALLBACK,
            )

        site = lookup_site(domain)
        title = site.site_name if is_known_site(domain) else f"Visit {domain}"
        description = site.description
        image = ""

        hint = lookup_fallback_hint(domain)
        if hint is not None:
            title, description = hint.title, hint.description

        repository = github_repository_preview(domain, urlsplit(target_url).path)
        if repository is not None:
            title, description, image = repository.title, repository.description, repository.image

        return UrlMetadata(
            title=title,
            description=description,
            image=image,
            url=target_url,
            domain=domain,
            favicon=get_favicon_url(target_url),
            site_name=site.site_name,
            type=self._platform_type(domain) or DEFAULT_TYPE,
            source=SOURCE_FALLBACK,
        )
