"""
Hostname to address resolution via dnspython.
"""

import logging
from typing import Optional, Protocol

import dns.exception
import dns.resolver

from domainer.config import get_config

from .errors import ResolutionError

logger = logging.getLogger(__name__)


class HostResolver(Protocol):
    """Anything that can turn a hostname into addresses."""

    def resolve(self, hostname: str) -> list[str]:
        ...


class DNSResolver:
    """
    Resolve hostnames to IPv4 and IPv6 addresses.

    A records are listed before AAAA records. A missing record type is not
    an error as long as the other one answers.
    """

    RECORD_TYPES = ("A", "AAAA")

    def __init__(
        self,
        lifetime: Optional[float] = None,
        nameservers: Optional[list[str]] = None,
    ):
        """
        Initialize the resolver.

        Args:
            lifetime: Seconds allowed per lookup (defaults to config.resolver.lifetime)
            nameservers: Nameserver addresses (defaults to config, then resolv.conf)
        """
        config = get_config()
        if nameservers is None:
            nameservers = config.resolver.nameservers
        if lifetime is None:
            lifetime = config.resolver.lifetime

        # Explicit nameservers replace resolv.conf entirely
        self.resolver = dns.resolver.Resolver(configure=not nameservers)
        if nameservers:
            self.resolver.nameservers = list(nameservers)
        self.resolver.lifetime = lifetime

    def resolve(self, hostname: str) -> list[str]:
        """
        Look up every address of hostname.

        Args:
            hostname: Fully qualified name, e.g. 'example.com'

        Returns:
            Addresses as text, A records first

        Raises:
            ResolutionError: If no record type yields an address
        """
        addresses: list[str] = []
        last_error: Optional[dns.exception.DNSException] = None

        for rdtype in self.RECORD_TYPES:
            try:
                answer = self.resolver.resolve(hostname, rdtype)
            except (dns.resolver.NoAnswer, dns.resolver.NXDOMAIN) as exc:
                last_error = exc
                continue
            except dns.exception.DNSException as exc:
                logger.debug("%s lookup for %s failed: %s", rdtype, hostname, exc)
                raise ResolutionError(
                    f"Failed to resolve '{hostname}': {exc}", hostname
                ) from exc
            addresses.extend(rdata.to_text() for rdata in answer)

        if not addresses:
            logger.debug("No addresses for %s", hostname)
            raise ResolutionError(
                f"No addresses found for '{hostname}'", hostname
            ) from last_error

        return addresses
