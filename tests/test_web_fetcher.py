import asyncio

import httpx
import pytest

from portfolio_server.services.exceptions import (
    EmptyContentError,
    HTTPFetchError,
    ServiceTimeoutError,
    UnsupportedContentTypeError,
    URLValidationError,
)
from portfolio_server.services.result import Failure, Success
from portfolio_server.services.url_validator import URLValidator
from portfolio_server.services.web_fetcher import WebFetcher

PAGE = "<html><head><title>Hello</title></head><body></body></html>"


def make_fetcher(handler, timeout=2.0):
    return WebFetcher(
        URLValidator(),
        timeout=timeout,
        transport=httpx.MockTransport(handler),
    )


class TestWebFetcher:
    """Unit tests for WebFetcher"""

    @pytest.mark.asyncio
    async def test_fetch_html_success(self):
        """A 200 HTML response comes back as a FetchedPage."""
        # Arrange
        fetcher = make_fetcher(lambda request: httpx.Response(200, html=PAGE))

        # Act
        result = await fetcher.fetch_html("https://site.test/page")

        # Assert
        assert isinstance(result, Success)
        assert result.value.content == PAGE.encode("utf-8")
        assert result.value.url == "https://site.test/page"
        assert result.value.status_code == 200

    @pytest.mark.asyncio
    async def test_sends_browser_like_headers(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, html=PAGE)

        await make_fetcher(handler).fetch_html("https://site.test/")

        assert seen["user-agent"].startswith("Mozilla/5.0")
        assert "text/html" in seen["accept"]
        assert seen["accept-language"]

    @pytest.mark.asyncio
    async def test_follows_redirects(self):
        """The final URL after redirects is reported."""
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "https://site.test/new"})
            return httpx.Response(200, html=PAGE)

        result = await make_fetcher(handler).fetch_html("https://site.test/old")

        assert isinstance(result, Success)
        assert result.value.url == "https://site.test/new"

    @pytest.mark.asyncio
    async def test_non_2xx_is_failure(self):
        fetcher = make_fetcher(lambda request: httpx.Response(404, html="<html>Not found</html>"))

        result = await fetcher.fetch_html("https://site.test/missing")

        assert isinstance(result, Failure)
        assert isinstance(result.error, HTTPFetchError)
        assert result.error.status_code == 404

    @pytest.mark.asyncio
    async def test_empty_body_is_failure(self):
        fetcher = make_fetcher(
            lambda request: httpx.Response(200, headers={"content-type": "text/html"}, content=b"  \n ")
        )

        result = await fetcher.fetch_html("https://site.test/")

        assert isinstance(result, Failure)
        assert isinstance(result.error, EmptyContentError)

    @pytest.mark.asyncio
    async def test_non_html_content_type_is_failure(self):
        fetcher = make_fetcher(lambda request: httpx.Response(200, json={"not": "html"}))

        result = await fetcher.fetch_html("https://site.test/api")

        assert isinstance(result, Failure)
        assert isinstance(result.error, UnsupportedContentTypeError)

    @pytest.mark.asyncio
    async def test_connection_error_is_failure(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        result = await make_fetcher(handler).fetch_html("https://down.test/")

        assert isinstance(result, Failure)
        assert isinstance(result.error, HTTPFetchError)
        assert result.error.status_code == 0

    @pytest.mark.asyncio
    async def test_timeout_is_enforced(self):
        """A slow server is abandoned at the deadline."""
        async def handler(request):
            await asyncio.sleep(5)
            return httpx.Response(200, html=PAGE)

        fetcher = make_fetcher(handler, timeout=0.05)

        result = await asyncio.wait_for(fetcher.fetch_html("https://slow.test/"), timeout=2)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ServiceTimeoutError)

    @pytest.mark.asyncio
    async def test_unsafe_url_is_not_requested(self):
        """Private hosts are refused before any request is made."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, html=PAGE)

        result = await make_fetcher(handler).fetch_html("http://localhost/admin")

        assert isinstance(result, Failure)
        assert isinstance(result.error, URLValidationError)
        assert calls == []

    @pytest.mark.asyncio
    async def test_redirect_to_private_host_is_refused(self):
        """A public page cannot bounce the fetcher onto a loopback address."""
        # Arrange
        requested = []

        def handler(request):
            requested.append(str(request.url))
            if request.url.host == "public.test":
                return httpx.Response(302, headers={"Location": "http://127.0.0.1/admin"})
            return httpx.Response(200, html=PAGE)

        # Act
        result = await make_fetcher(handler).fetch_html("http://public.test/")

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, URLValidationError)
        assert requested == ["http://public.test/"]

    @pytest.mark.asyncio
    async def test_relative_redirect_to_numeric_loopback_is_refused(self):
        requested = []

        def handler(request):
            requested.append(str(request.url))
            if request.url.path == "/start":
                return httpx.Response(301, headers={"Location": "http://2130706433/"})
            return httpx.Response(200, html=PAGE)

        result = await make_fetcher(handler).fetch_html("https://site.test/start")

        assert isinstance(result.error, URLValidationError)
        assert len(requested) == 1

    @pytest.mark.asyncio
    async def test_redirect_loop_is_bounded(self):
        def handler(request):
            return httpx.Response(302, headers={"Location": "https://site.test/loop"})

        fetcher = WebFetcher(
            URLValidator(),
            timeout=2.0,
            max_redirects=3,
            transport=httpx.MockTransport(handler),
        )

        result = await fetcher.fetch_html("https://site.test/loop")

        assert isinstance(result, Failure)
        assert isinstance(result.error, HTTPFetchError)
        assert result.error.status_code == 302

    @pytest.mark.asyncio
    async def test_redirects_disabled(self):
        """Without redirect following a 3xx is an ordinary HTTP failure."""
        def handler(request):
            return httpx.Response(301, headers={"Location": "https://site.test/new"})

        fetcher = WebFetcher(
            URLValidator(),
            timeout=2.0,
            follow_redirects=False,
            transport=httpx.MockTransport(handler),
        )

        result = await fetcher.fetch_html("https://site.test/old")

        assert isinstance(result.error, HTTPFetchError)
        assert result.error.status_code == 301

    @pytest.mark.asyncio
    async def test_raw_bytes_and_header_charset_are_kept(self):
        """The body is not decoded here; the header charset travels with it."""
        body = "<html><head><title>Amapá</title></head></html>".encode("iso-8859-1")
        fetcher = make_fetcher(
            lambda request: httpx.Response(
                200, headers={"content-type": "text/html; charset=ISO-8859-1"}, content=body
            )
        )

        result = await fetcher.fetch_html("https://site.test/")

        assert result.value.content == body
        assert result.value.encoding.lower() == "iso-8859-1"

    @pytest.mark.asyncio
    async def test_no_header_charset(self):
        fetcher = make_fetcher(
            lambda request: httpx.Response(200, headers={"content-type": "text/html"}, content=PAGE.encode())
        )

        result = await fetcher.fetch_html("https://site.test/")

        assert result.value.encoding is None
