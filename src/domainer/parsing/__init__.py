"""
URL decomposition.

Handles delimiter splitting, eTLD+1 extraction and optional address lookup.
"""

from .errors import (
    DomainerError,
    MalformedPortError,
    ParseError,
    ResolutionError,
    UnrecognizedSuffixError,
)
from .models import ParsedURL, QueryParam
from .resolver import DNSResolver, HostResolver
from .suffix import PublicSuffixLookup, SuffixLookup
from .url_parser import URLParser, get_parser, parse_url, reset_parser

__all__ = [
    "URLParser",
    "ParsedURL",
    "QueryParam",
    "PublicSuffixLookup",
    "SuffixLookup",
    "DNSResolver",
    "HostResolver",
    "DomainerError",
    "ParseError",
    "MalformedPortError",
    "UnrecognizedSuffixError",
    "ResolutionError",
    "get_parser",
    "reset_parser",
    "parse_url",
]
