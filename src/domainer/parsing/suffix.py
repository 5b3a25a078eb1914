"""
Public suffix lookup.

Splits a bare hostname into its registrable part (eTLD+1) using the
Public Suffix List. Anything implementing SuffixLookup can stand in for
the real list, which keeps the parser testable with a fake suffix table.
"""

import ipaddress
import logging
from pathlib import Path
from typing import Optional, Protocol

from publicsuffixlist import PublicSuffixList

from domainer.config import get_config

from .errors import UnrecognizedSuffixError

logger = logging.getLogger(__name__)


class SuffixLookup(Protocol):
    """Anything that can compute the eTLD+1 of a hostname."""

    def effective_tld_plus_one(self, host: str) -> str:
        """Return the registrable domain of host or raise UnrecognizedSuffixError."""
        ...


def check_host_labels(host: str) -> None:
    """
    Reject hosts that can never carry a registrable domain.

    Raises:
        UnrecognizedSuffixError: For empty hosts, IP literals, and hosts
            with a leading dot, trailing dot, or empty label
    """
    if not host:
        raise UnrecognizedSuffixError("Empty host has no public suffix", host)

    if host.startswith(".") or host.endswith(".") or ".." in host:
        raise UnrecognizedSuffixError(f"Empty label in host '{host}'", host)

    try:
        ipaddress.ip_address(host)
    except ValueError:
        return
    raise UnrecognizedSuffixError(f"IP address '{host}' has no public suffix", host)


class PublicSuffixLookup:
    """
    eTLD+1 lookup backed by publicsuffixlist.

    Usage:
        lookup = PublicSuffixLookup()
        lookup.effective_tld_plus_one("www.example.co.uk")  # "example.co.uk"
    """

    def __init__(self, psl_file: Optional[Path] = None, only_icann: Optional[bool] = None):
        """
        Load the Public Suffix List.

        Args:
            psl_file: Path to a PSL data file (defaults to config.suffix.psl_file,
                then the copy bundled with publicsuffixlist)
            only_icann: Ignore private-section rules (defaults to config)
        """
        config = get_config()
        psl_file = psl_file or config.suffix.psl_file
        if only_icann is None:
            only_icann = config.suffix.only_icann

        if psl_file is not None:
            with Path(psl_file).open("rb") as source:
                self.psl = PublicSuffixList(source, only_icann=only_icann)
            logger.info(f"Loaded public suffix list from {psl_file}")
        else:
            self.psl = PublicSuffixList(only_icann=only_icann)

    def effective_tld_plus_one(self, host: str) -> str:
        """
        Get the public suffix of host plus one more label.

        Matching is case-insensitive; the returned labels are taken from
        host as given.

        Args:
            host: Bare hostname (no port, credentials or path)

        Returns:
            Registrable domain, e.g. 'example.co.uk' for 'www.example.co.uk'

        Raises:
            UnrecognizedSuffixError: If host is itself a public suffix or
                cannot carry one
        """
        check_host_labels(host)

        private = self.psl.privatesuffix(host.lower())
        if not private:
            logger.debug("No registrable domain for host %r", host)
            raise UnrecognizedSuffixError(
                f"Cannot derive eTLD+1 for host '{host}'", host
            )

        label_count = private.count(".") + 1
        return ".".join(host.split(".")[-label_count:])
