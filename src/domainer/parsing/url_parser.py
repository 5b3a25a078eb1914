"""
URL decomposition.

Carves a URL or bare domain into protocol, credentials, host, port, path,
query and fragment by locating delimiters in a fixed left-to-right order,
then splits the host into subdomain, domain and TLD with a public suffix
lookup:

    1. protocol     http:// or https:// prefix
    2. path         first '/'
    3. credentials  first '@' in the authority, then first ':'
    4. port         first ':' in the remaining authority
    5. query        first '?' in the path
    6. fragment     first '#' in the query
    7. parameters   '&'-separated parts with exactly one '='
    8. suffix       eTLD+1 of the host

The order matters: the path is removed before credentials are looked for,
so an '@' in the path is never read as a userinfo separator. Every search
takes the first occurrence, so a password containing '@' is mis-split.
"""

import logging
import re
from typing import Optional

from domainer.config import get_config

from .errors import MalformedPortError, ResolutionError
from .models import ParsedURL, QueryParam
from .resolver import DNSResolver, HostResolver
from .suffix import PublicSuffixLookup, SuffixLookup

logger = logging.getLogger(__name__)

PROTOCOLS = ("http", "https")

_PORT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_DIGITS = 19


def split_protocol(url: str) -> tuple[str, str]:
    """Split off an http:// or https:// prefix; protocol is '' when absent."""
    for protocol in PROTOCOLS:
        prefix = f"{protocol}://"
        if url.startswith(prefix):
            return protocol, url[len(prefix):]
    return "", url


def split_path(url: str) -> tuple[str, str]:
    """Split at the first '/' into (authority, path-bearing tail)."""
    index = url.find("/")
    if index == -1:
        return url, ""
    return url[:index], url[index:]


def split_credentials(authority: str) -> tuple[str, str, str]:
    """Split 'user:pass@host:port' into (username, password, host:port)."""
    credentials, sep, host_port = authority.partition("@")
    if not sep:
        return "", "", authority

    username, _, password = credentials.partition(":")
    return username, password, host_port


def parse_port(text: str) -> int:
    """
    Parse port text as a signed base-10 integer.

    Raises:
        MalformedPortError: If text is empty, not decimal digits, or
            outside the 64-bit range
    """
    if not _PORT_RE.fullmatch(text):
        raise MalformedPortError(f"Invalid port '{text}'", text)

    sign = text[0] if text[0] in "+-" else ""
    digits = text[len(sign):].lstrip("0") or "0"
    if len(digits) > _INT64_DIGITS:
        raise MalformedPortError(f"Port '{text}' out of range", text)

    port = int(sign + digits)
    if not _INT64_MIN <= port <= _INT64_MAX:
        raise MalformedPortError(f"Port '{text}' out of range", text)
    return port


def split_port(authority: str) -> tuple[str, int]:
    """Split 'host:port' into (host, port); port is 0 when no ':' is present."""
    host, sep, port_text = authority.partition(":")
    if not sep:
        return host, 0
    return host, parse_port(port_text)


def split_query(tail: str) -> tuple[str, str]:
    """Split at the first '?' into (path, query tail); the tail keeps its '?'."""
    index = tail.find("?")
    if index == -1:
        return tail, ""
    return tail[:index], tail[index:]


def split_fragment(query_tail: str) -> tuple[str, str]:
    """Split at the first '#' into (query string, fragment without '#')."""
    query, _, fragment = query_tail.partition("#")
    return query, fragment


def parse_query(query: str) -> tuple[QueryParam, ...]:
    """
    Parse 'a=1&b=2' into ordered QueryParams.

    Parts without exactly one '=' (e.g. 'flag' or 'a=b=c') are dropped.
    Duplicate keys are kept in order.
    """
    if not query:
        return ()

    if query.startswith("?"):
        query = query[1:]

    params = []
    for part in query.split("&"):
        pieces = part.split("=")
        if len(pieces) == 2:
            params.append(QueryParam(key=pieces[0], value=pieces[1]))
    return tuple(params)


def split_host(host: str, registrable: str) -> tuple[str, str, str]:
    """
    Split host into (subdomain, domain, tld) given its eTLD+1.

    The TLD is every label of registrable after the first. Stripping
    '.<tld>' from host leaves the subdomain labels followed by the domain.
    """
    tld = ".".join(registrable.split(".")[1:])

    remainder = host
    if tld and remainder.endswith(f".{tld}"):
        remainder = remainder[: -(len(tld) + 1)]

    *subdomain_labels, domain = remainder.split(".")
    return ".".join(subdomain_labels), domain, tld


class URLParser:
    """
    URL decomposition engine.

    Usage:
        parser = URLParser()
        result = parser.parse("https://www.example.co.uk:443/search?q=hi#top")
        print(result.subdomain, result.domain, result.tld)  # www example co.uk
    """

    def __init__(
        self,
        suffix_lookup: Optional[SuffixLookup] = None,
        resolver: Optional[HostResolver] = None,
    ):
        """
        Initialize the parser.

        Args:
            suffix_lookup: eTLD+1 lookup (creates PublicSuffixLookup if None)
            resolver: Hostname resolver, created on first use if None
        """
        self.suffix_lookup = suffix_lookup or PublicSuffixLookup()
        self._resolver = resolver

    @property
    def resolver(self) -> HostResolver:
        if self._resolver is None:
            self._resolver = DNSResolver()
        return self._resolver

    def parse(self, url: str) -> ParsedURL:
        """
        Decompose a URL without touching the network.

        Args:
            url: URL or bare domain, e.g. 'user@example.com:80'

        Returns:
            Fully populated ParsedURL (ip_address is None)

        Raises:
            MalformedPortError: If the port text is not an integer
            UnrecognizedSuffixError: If the host has no registrable domain
        """
        protocol, remainder = split_protocol(url)
        authority, tail = split_path(remainder)
        username, password, authority = split_credentials(authority)
        host, port = split_port(authority)
        path, query_tail = split_query(tail)
        query, fragment = split_fragment(query_tail)
        params = parse_query(query)

        hostname = self.suffix_lookup.effective_tld_plus_one(host)
        subdomain, domain, tld = split_host(host, hostname)

        parsed = ParsedURL(
            full_url=url,
            protocol=protocol,
            username=username,
            password=password,
            subdomain=subdomain,
            hostname=hostname,
            domain=domain,
            tld=tld,
            port=port,
            path=path,
            query=params,
            fragment=fragment,
        )
        logger.debug("Parsed %r -> host=%s port=%d", url, hostname, port)
        return parsed

    def parse_with_resolution(self, url: str) -> ParsedURL:
        """
        Decompose a URL and resolve its registrable hostname.

        The eTLD+1 (hostname), not the full host, is resolved and the first
        address returned is kept.

        Raises:
            MalformedPortError, UnrecognizedSuffixError: As for parse()
            ResolutionError: If the hostname does not resolve
        """
        parsed = self.parse(url)
        addresses = self.resolver.resolve(parsed.hostname)
        if not addresses:
            raise ResolutionError(
                f"No addresses found for '{parsed.hostname}'", parsed.hostname
            )
        return parsed.with_ip_address(addresses[0])


# Global parser instance
_parser: Optional[URLParser] = None


def get_parser() -> URLParser:
    """Get or create the global parser instance."""
    global _parser
    if _parser is None:
        _parser = URLParser()
    return _parser


def reset_parser() -> None:
    """Reset the global parser (mainly for testing)."""
    global _parser
    _parser = None


def parse_url(url: str, resolve: Optional[bool] = None) -> ParsedURL:
    """
    Parse url with the global parser.

    Args:
        url: URL or bare domain
        resolve: Also resolve the hostname (defaults to config.resolve_ip)
    """
    if resolve is None:
        resolve = get_config().resolve_ip

    parser = get_parser()
    if resolve:
        return parser.parse_with_resolution(url)
    return parser.parse(url)
