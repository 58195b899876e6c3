import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

import httpx
from .url_validator import URLValidatorInterface
from .exceptions import (
    URLValidationError,
    HTTPFetchError,
    UnsupportedContentTypeError,
    EmptyContentError,
    ServiceTimeoutError,
)
from .result import Failure, Result, Success

# Import settings
from portfolio_server.core.config import settings

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPES = ("html", "xml")


@dataclass(frozen=True)
class FetchedPage:
    """
    Body of a successful GET; url is the final URL after redirects.

    content stays as raw bytes so the parser can honour the page's own
    <meta charset>; encoding is the charset from the Content-Type header,
    if it named one.
    """
    url: str
    content: bytes
    status_code: int
    encoding: Optional[str] = None


class WebFetcherInterface(ABC):
    """Interface for fetching web content following the Dependency Inversion Principle"""

    @abstractmethod
    async def fetch_html(self, url: str) -> Result[FetchedPage]:
        pass


def default_headers() -> Dict[str, str]:
    """Browser-like request headers, which fewer sites reject as bots"""
    return {
        "User-Agent": settings.fetch_user_agent,
        "Accept": settings.fetch_accept,
        "Accept-Language": settings.fetch_accept_language,
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


class WebFetcher(WebFetcherInterface):
    """
    Fetches HTML content from URLs safely.

    Every call performs a GET bounded by a hard deadline. Redirects are
    followed one hop at a time so each target passes the URL validator
    before it is requested. Problems are returned as Failure values so the
    caller can decide to try another URL.
    """

    def __init__(
        self,
        url_validator: URLValidatorInterface,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        follow_redirects: Optional[bool] = None,
        max_redirects: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url_validator = url_validator
        self.timeout = settings.fetch_timeout if timeout is None else timeout
        self.headers = headers or default_headers()
        self.follow_redirects = (
            settings.fetch_follow_redirects if follow_redirects is None else follow_redirects
        )
        self.max_redirects = settings.fetch_max_redirects if max_redirects is None else max_redirects
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=False,
            headers=self.headers,
            transport=self.transport,
        )

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        """GET url, following redirects only to targets the validator accepts"""
        res = await client.get(url)
        hops = 0
        while self.follow_redirects and res.is_redirect and res.next_request is not None:
            next_url = str(res.next_request.url)
            if not self.url_validator.validate(next_url):
                raise URLValidationError(f"Redirect from {res.url} to unsafe URL refused: {next_url}")
            hops += 1
            if hops > self.max_redirects:
                raise HTTPFetchError(
                    status_code=res.status_code,
                    message=f"Exceeded {self.max_redirects} redirects fetching {url}",
                )
            res = await client.get(next_url)
        return res

    async def fetch_html(self, url: str) -> Result[FetchedPage]:
        """Fetch HTML content from a URL with validation"""
        logger.info(f"Fetching HTML content from URL: {url}")

        if not self.url_validator.validate(url):
            return Failure(URLValidationError(f"Invalid or unsafe URL provided: {url}"))

        try:
            async with self._client() as client:
                # httpx timeouts apply per phase; wait_for bounds the whole request
                res = await asyncio.wait_for(self._get(client, url), timeout=self.timeout)
        except (URLValidationError, HTTPFetchError) as e:
            return Failure(e)
        except asyncio.TimeoutError:
            return Failure(ServiceTimeoutError(f"Timed out after {self.timeout}s fetching {url}"))
        except httpx.TimeoutException as e:
            return Failure(ServiceTimeoutError(f"Timed out fetching {url}: {str(e)}"))
        except httpx.HTTPError as e:
            return Failure(HTTPFetchError(status_code=0, message=f"Request error occurred: {str(e)}"))
        except httpx.InvalidURL as e:
            return Failure(HTTPFetchError(status_code=0, message=f"Request could not be built: {str(e)}"))

        if not res.is_success:
            return Failure(HTTPFetchError(status_code=res.status_code))

        content_type = res.headers.get("content-type", "")
        if content_type and not any(kind in content_type.lower() for kind in HTML_CONTENT_TYPES):
            return Failure(UnsupportedContentTypeError(content_type))

        content = res.content
        if not content or not content.strip():
            return Failure(EmptyContentError(f"Empty HTML response from {url}"))

        logger.info(f"Successfully fetched HTML content from URL: {url}")
        return Success(FetchedPage(
            url=str(res.url),
            content=content,
            status_code=res.status_code,
            encoding=res.charset_encoding,
        ))
