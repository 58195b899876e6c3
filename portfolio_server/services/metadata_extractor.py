import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from .html_parser import HTMLParser, clean_text, collapse_whitespace
from .exceptions import NoMetadataError, ParseError
from .result import Failure, Result, Success
from portfolio_server.core.models import DEFAULT_TYPE, PageMetadata


logger = logging.getLogger(__name__)


class MetadataExtractorInterface(ABC):
    """Interface for metadata extraction following the Dependency Inversion Principle"""

    @abstractmethod
    def extract(self, html: Union[str, bytes], url: str, encoding: Optional[str] = None) -> Result[PageMetadata]:
        pass


class MetadataExtractor(MetadataExtractorInterface):
    """
    Extracts link preview metadata from HTML following the Open Graph protocol,
    Twitter Cards and generic meta tags.

    Returns Success(PageMetadata) when at least one of title, description or
    image was found, Failure(NoMetadataError) when the page had none of them,
    and Failure(ParseError) if the document could not be processed at all.
    """

    def extract(self, html: Union[str, bytes], url: str, encoding: Optional[str] = None) -> Result[PageMetadata]:
        try:
            html_parser = HTMLParser(html, url, encoding)

            tags = html_parser.get_tags()
            metadata = PageMetadata(
                title=clean_text(html_parser.get_title()),
                description=clean_text(html_parser.get_description()),
                image=html_parser.get_absolute_image(),
                site_name=collapse_whitespace(html_parser.get_site_name()),
                type=collapse_whitespace(html_parser.get_type()) or DEFAULT_TYPE,
                author=collapse_whitespace(html_parser.get_author()) or None,
                published_time=collapse_whitespace(html_parser.get_published_time()) or None,
                modified_time=collapse_whitespace(html_parser.get_modified_time()) or None,
                tags=tuple(tags) if tags else None,
            )
        except Exception as e:
            # lxml and bs4 are lenient, but a broken document must not escape
            return Failure(ParseError(f"Failed to parse HTML from {url}: {str(e)}"))

        if not metadata.is_usable:
            return Failure(NoMetadataError(f"No title, description or image found at {url}"))

        return Success(metadata)
