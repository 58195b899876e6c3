"""Maps UrlMetadata onto the fields a link preview card displays"""

from dataclasses import dataclass
from typing import Optional

from .knowledge_base import is_known_site
from .platform_detector import PlatformDetector, PlatformDetectorInterface
from portfolio_server.core.models import UrlMetadata

TYPE_LABELS = {
    "video": "Video",
    "audio": "Audio",
    "social": "Social post",
    "professional": "Profile",
    "article": "Article",
}
DEFAULT_LABEL = "Publication"


@dataclass(frozen=True)
class LinkPreview:
    title: str
    description: str
    image: str
    domain: str
    favicon_url: str
    publication_type: str


def publication_type_label(
    metadata: UrlMetadata, platform_detector: Optional[PlatformDetectorInterface] = None
) -> str:
    """
    Coarse label for the card footer. Known platforms win over the raw
    og:type, and pages from known news outlets read as articles.
    """
    detector = platform_detector or PlatformDetector()
    platform = detector.detect_platform(metadata.domain)
    if platform is not None:
        return TYPE_LABELS.get(platform.type, DEFAULT_LABEL)

    label = TYPE_LABELS.get((metadata.type or "").lower())
    if label:
        return label
    if is_known_site(metadata.domain):
        return TYPE_LABELS["article"]
    return DEFAULT_LABEL


def build_link_preview(
    metadata: UrlMetadata, platform_detector: Optional[PlatformDetectorInterface] = None
) -> LinkPreview:
    """
    Display fields for a preview card. A missing image or favicon stays an
    empty string; the card decides what to render in its place.
    """
    domain = metadata.domain
    return LinkPreview(
        title=metadata.title or domain,
        description=metadata.description or (f"Published on {domain}" if domain else ""),
        image=metadata.image or "",
        domain=domain,
        favicon_url=metadata.favicon or "",
        publication_type=publication_type_label(metadata, platform_detector),
    )
