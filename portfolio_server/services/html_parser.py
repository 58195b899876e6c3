"""HTML parsing utilities for metadata extraction"""

import logging
import re
from typing import Optional, List, Tuple, Union
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup, UnicodeDammit


logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")

# Lazy-loading attributes are checked before the plain src
IMAGE_SOURCE_ATTRS = ("data-src", "data-original", "data-lazy-src", "src")


def collapse_whitespace(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and trim"""
    if not text:
        return ""
    return WHITESPACE_RE.sub(" ", text).strip()


def clean_text(text: Optional[str]) -> str:
    """Plain text with markup removed and whitespace collapsed"""
    if not text:
        return ""
    if "<" in text and ">" in text:
        text = BeautifulSoup(text, "html.parser").get_text(" ")
    return collapse_whitespace(text)


def resolve_url(base_url: str, value: Optional[str]) -> str:
    """
    Resolve a possibly relative or protocol-relative URL against base_url.

    Returns '' when the value cannot be resolved into an absolute http(s) URL.
    """
    if not value:
        return ""
    value = value.strip()
    if not value:
        return ""
    try:
        resolved = urljoin(base_url, value)
        parsed = urlsplit(resolved)
    except ValueError as e:
        logger.debug(f"Failed to resolve '{value}' against {base_url}: {str(e)}")
        return ""
    if parsed.scheme.lower() not in ("http", "https") or not parsed.netloc:
        return ""
    return resolved


def decode_html(content: bytes, encoding: Optional[str] = None) -> str:
    """
    Decode a raw HTML body.

    A charset from the Content-Type header wins, then a byte order mark, then
    UTF-8 if the bytes are valid UTF-8, then the document's own
    <meta charset>; statistical detection and windows-1252 are the last resort.
    """
    dammit = UnicodeDammit(
        content,
        known_definite_encodings=[encoding] if encoding else [],
        user_encodings=["utf-8"],
        is_html=True,
    )
    return dammit.unicode_markup or ""


class HTMLParser:
    """Encapsulates HTML parsing functionality"""

    def __init__(self, html: Union[str, bytes], url: str, encoding: Optional[str] = None):
        """
        Initialize the HTML parser

        Args:
            html: HTML content to parse, as text or as the raw response body
            url: Base URL for resolving relative links
            encoding: Charset from the Content-Type header, used for raw bytes;
                without it the bytes are sniffed by decode_html
        """
        self.html = html
        self.url = url
        if isinstance(html, bytes):
            html = decode_html(html, encoding)
        self.soup = BeautifulSoup(html, "lxml")
        self._meta_index = self._index_meta_tags()

    def _index_meta_tags(self) -> List[Tuple[str, str, str]]:
        """(attribute, lowercased key, content) for every <meta> carrying content"""
        index = []
        for el in self.soup.find_all("meta"):
            content = el.get("content")
            if isinstance(content, list):
                content = " ".join(content)
            if content is None:
                continue
            for attr in ("property", "name", "itemprop"):
                key = el.get(attr)
                if isinstance(key, list):
                    key = " ".join(key)
                if key:
                    index.append((attr, key.strip().lower(), str(content)))
        return index

    def get_meta_content(self, tag: str, attrs: Tuple[str, ...] = ("property", "name")) -> Optional[str]:
        """Helper function to extract meta tag content"""
        wanted = tag.lower()
        for attr, key, content in self._meta_index:
            if attr in attrs and key == wanted:
                content = content.strip()
                if content:
                    return content
        return None

    def get_meta_values(self, tag: str) -> List[str]:
        """All non-empty values of a repeatable meta tag such as article:tag"""
        wanted = tag.lower()
        values = []
        for attr, key, content in self._meta_index:
            if attr in ("property", "name") and key == wanted and content.strip():
                values.append(content.strip())
        return values

    def get_meta_list(self, tag: str, separator: str = ",") -> Optional[List[str]]:
        """Helper function to extract a list of values from a tag"""
        content = self.get_meta_content(tag)
        if content:
            # Split by common separators and clean up
            values = [item.strip() for item in content.split(separator) if item.strip()]
            if values:
                return values
        return None

    def first_meta(self, *tags: str) -> Optional[str]:
        """First non-empty content among the given meta keys, in order"""
        for tag in tags:
            value = self.get_meta_content(tag)
            if value:
                return value
        return None

    def get_title(self) -> Optional[str]:
        """Extract title from multiple possible sources"""
        title = self.first_meta("og:title", "twitter:title")

        if not title:
            # Fallback to HTML title tag
            title_tag = self.soup.find("title")
            if title_tag:
                t = title_tag.get_text().strip()
                title = t if t else None

        return title

    def get_description(self) -> Optional[str]:
        """Extract description from multiple possible sources"""
        return self.first_meta("og:description", "twitter:description", "description")

    def get_image(self) -> Optional[str]:
        """Extract the raw (unresolved) image reference from multiple possible sources"""
        image = self.first_meta(
            "og:image",
            "og:image:secure_url",
            "twitter:image",
            "twitter:image:src",
        ) or self.get_meta_content("image", attrs=("itemprop",))

        if not image:
            link_tag = self.soup.find("link", rel=lambda x: x and "image_src" in str(x).lower())
            if link_tag and link_tag.get("href"):
                image = str(link_tag.get("href")).strip() or None

        if not image:
            # Fallback: first image on the page, lazy-load attributes first
            for attr in IMAGE_SOURCE_ATTRS:
                img_tag = self.soup.find("img", attrs={attr: True})
                if img_tag:
                    value = img_tag.get(attr)
                    if isinstance(value, list):
                        value = value[0] if value else None
                    if value and str(value).strip():
                        image = str(value).strip()
                        break

        return image

    def get_absolute_image(self) -> str:
        """Image resolved to an absolute URL, or '' if none or unresolvable"""
        return resolve_url(self.url, self.get_image())

    def get_site_name(self) -> Optional[str]:
        return self.get_meta_content("og:site_name")

    def get_type(self) -> Optional[str]:
        return self.get_meta_content("og:type")

    def get_author(self) -> Optional[str]:
        return self.first_meta("author", "article:author")

    def get_published_time(self) -> Optional[str]:
        return self.first_meta("article:published_time", "article:published")

    def get_modified_time(self) -> Optional[str]:
        return self.first_meta("article:modified_time", "article:modified")

    def get_tags(self) -> Optional[List[str]]:
        """Article tags, falling back to the comma separated keywords meta"""
        tags = self.get_meta_values("article:tag")
        if tags:
            return list(dict.fromkeys(tags))
        return self.get_meta_list("keywords")

