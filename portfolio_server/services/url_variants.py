"""URL helpers: domain and favicon derivation, and alternate URL variants"""

import ipaddress
import logging
from typing import List, Optional
from urllib.parse import SplitResult, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

WWW_PREFIX = "www."


def _split(url: str) -> Optional[SplitResult]:
    try:
        parsed = urlsplit(url)
        # Touch the port so out-of-range values fail here
        parsed.port
    except (ValueError, TypeError, AttributeError):
        return None
    if parsed.scheme.lower() not in ("http", "https") or not parsed.hostname:
        return None
    return parsed


def get_domain(url: str) -> str:
    """Lowercased hostname with a single leading 'www.' removed, or '' if unparseable"""
    parsed = _split(url)
    if parsed is None:
        return ""
    hostname = parsed.hostname
    if hostname.startswith(WWW_PREFIX):
        hostname = hostname[len(WWW_PREFIX):]
    return hostname


def get_favicon_url(url: str) -> str:
    """Conventional /favicon.ico location for the URL's host; not checked for existence"""
    parsed = _split(url)
    if parsed is None:
        return ""
    return f"{parsed.scheme.lower()}://{parsed.hostname}/favicon.ico"


def _is_ip_literal(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


def _replace_hostname(parsed: SplitResult, hostname: str) -> str:
    # Rebuild netloc so userinfo and port survive the swap
    netloc = hostname
    if ":" in hostname:
        netloc = f"[{hostname}]"
    if parsed.port is not None:
        netloc = f"{netloc}:{parsed.port}"
    if "@" in parsed.netloc:
        userinfo = parsed.netloc.rsplit("@", 1)[0]
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit(parsed._replace(netloc=netloc))


def generate_url_variants(url: str) -> List[str]:
    """
    Build the ordered list of URLs to try for a link.

    The original URL always comes first, followed by the URL with the
    leading 'www.' toggled on the hostname and the URL with the http/https
    scheme toggled. Each toggle is applied to the original on its own, so at
    most three entries come back. Unparseable input yields just [url].
    """
    parsed = _split(url)
    if parsed is None:
        logger.debug(f"Cannot build variants for unparseable URL: {url}")
        return [url]

    variants = [url]

    hostname = parsed.hostname
    if not _is_ip_literal(hostname):
        if hostname.startswith(WWW_PREFIX):
            toggled_host = hostname[len(WWW_PREFIX):]
        else:
            toggled_host = WWW_PREFIX + hostname
        variants.append(_replace_hostname(parsed, toggled_host))

    toggled_scheme = "https" if parsed.scheme.lower() == "http" else "http"
    variants.append(urlunsplit(parsed._replace(scheme=toggled_scheme)))

    # Deduplicate while keeping order
    return list(dict.fromkeys(variants))
