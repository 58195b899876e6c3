import ipaddress
import re
import socket
from typing import Optional, Union
from urllib.parse import urlsplit
from abc import ABC, abstractmethod

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

# Numeric IPv4 spellings: decimal, hex or octal parts, one to four of them
IPV4_SHORTHAND_RE = re.compile(r"^(0x[0-9a-f]*|\d+)(\.(0x[0-9a-f]*|\d+)){0,3}$", re.IGNORECASE)


class URLValidatorInterface(ABC):
    """Interface for URL validation following the Dependency Inversion Principle"""

    @abstractmethod
    def is_absolute_url(self, url: str) -> bool:
        """
        Check that a string is a syntactically valid absolute http(s) URL.

        Args:
            url: The URL string to check

        Returns:
            True if the URL can be parsed and has a scheme and host
        """
        pass

    @abstractmethod
    def validate(self, url: str) -> bool:
        """
        Validate a URL to check if it's safe and properly formatted.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        pass


class URLValidator(URLValidatorInterface):
    """
    Validates URLs and prevents SSRF attacks.
    This class implements URL validation logic to ensure URLs are safe to access.
    """

    # Host names that always point back at this machine
    private_patterns = [
        r"^localhost$",
        r"\.localhost$",
        r"^localhost\.localdomain$",
    ]

    def __init__(self, block_private_hosts: bool = True):
        self.block_private_hosts = block_private_hosts

    def is_absolute_url(self, url: str) -> bool:
        if not url or not isinstance(url, str):
            return False
        try:
            parsed = urlsplit(url.strip())
            if parsed.scheme.lower() not in ("http", "https"):
                return False
            if not parsed.netloc or not parsed.hostname:
                return False

            # Accessing .port raises ValueError when it is out of range
            if parsed.port is not None and parsed.port < 1:
                return False

            return True
        except ValueError:
            return False

    def validate(self, url: str) -> bool:
        """
        Validate URL and check for potential SSRF attacks.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL is valid and safe, False otherwise
        """
        if not self.is_absolute_url(url):
            return False
        if not self.block_private_hosts:
            return True

        hostname = (urlsplit(url.strip()).hostname or "").rstrip(".")

        for pattern in self.private_patterns:
            if re.search(pattern, hostname):
                return False

        address = parse_ip_host(hostname)
        if address is not None and is_internal_address(address):
            return False

        return True


def parse_ip_host(hostname: str) -> Optional[IPAddress]:
    """
    IP address a host string stands for, or None for a DNS name.

    Besides dotted quads and IPv6 literals this accepts the shorthand IPv4
    spellings clients also resolve, such as 2130706433, 0x7f000001,
    0177.0.0.1 and 127.1.
    """
    if not hostname:
        return None
    try:
        return ipaddress.ip_address(hostname)
    except ValueError:
        pass
    if ":" in hostname or not IPV4_SHORTHAND_RE.match(hostname):
        return None
    try:
        return ipaddress.IPv4Address(socket.inet_aton(hostname))
    except OSError:
        return None


def is_internal_address(address: IPAddress) -> bool:
    if isinstance(address, ipaddress.IPv6Address):
        # ::ffff:127.0.0.1 and friends reach the embedded IPv4 address
        embedded = address.ipv4_mapped or address.sixtofour
        if embedded is not None and is_internal_address(embedded):
            return True
    return (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_unspecified
        or address.is_reserved
        or address.is_multicast
    )
