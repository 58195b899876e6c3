from typing import Optional, Tuple
from dataclasses import dataclass

DEFAULT_TYPE = "website"

SOURCE_LIVE = "live"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class PageMetadata:
    """
    Fields extracted from a single HTML document, before the requested URL,
    domain and favicon are attached
    """
    title: str = ""
    description: str = ""
    image: str = ""
    site_name: str = ""
    type: str = DEFAULT_TYPE
    author: Optional[str] = None
    published_time: Optional[str] = None
    modified_time: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None

    @property
    def is_usable(self) -> bool:
        return bool(self.title or self.description or self.image)


@dataclass(frozen=True)
class UrlMetadata:
    """
    Normalized link preview for a URL, built either from the live page or
    from the fallback knowledge base
    """
    title: str
    description: str
    image: str
    url: str
    domain: str
    favicon: str
    site_name: str
    type: str = DEFAULT_TYPE
    author: Optional[str] = None
    published_time: Optional[str] = None
    modified_time: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    source: str = SOURCE_LIVE

    @property
    def is_fallback(self) -> bool:
        return self.source == SOURCE_FALLBACK
