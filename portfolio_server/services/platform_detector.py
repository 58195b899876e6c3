from abc import ABC, abstractmethod
from typing import NamedTuple, Optional


class Platform(NamedTuple):
    name: str
    type: str


class PlatformDetectorInterface(ABC):
    """Interface for platform detection following the Dependency Inversion Principle"""

    @abstractmethod
    def detect_platform(self, domain: str) -> Optional[Platform]:
        """
        Detect the platform from a domain.

        Args:
            domain: Hostname without the leading 'www.'

        Returns:
            The detected Platform, or None for ordinary sites
        """
        pass


class PlatformDetector(PlatformDetectorInterface):
    """
    Detects well-known platforms from a domain.
    Social networks, video and audio hosts get a content type of their own
    instead of the generic 'website'.
    """

    platform_mapping = {
        "twitter.com": Platform("X (Twitter)", "social"),
        "x.com": Platform("X (Twitter)", "social"),
        "facebook.com": Platform("Facebook", "social"),
        "instagram.com": Platform("Instagram", "social"),
        "tiktok.com": Platform("TikTok", "social"),
        "threads.net": Platform("Threads", "social"),
        "linkedin.com": Platform("LinkedIn", "professional"),
        "youtube.com": Platform("YouTube", "video"),
        "youtu.be": Platform("YouTube", "video"),
        "vimeo.com": Platform("Vimeo", "video"),
        "spotify.com": Platform("Spotify", "audio"),
        "soundcloud.com": Platform("SoundCloud", "audio"),
    }

    def detect_platform(self, domain: str) -> Optional[Platform]:
        domain = (domain or "").lower()

        for platform_domain, platform in self.platform_mapping.items():
            if domain == platform_domain or domain.endswith("." + platform_domain):
                return platform

        return None
