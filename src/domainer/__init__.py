"""
domainer: split URLs into protocol, credentials, subdomain, domain, TLD,
port, path, query and fragment.
"""

from domainer.parsing import (
    MalformedPortError,
    ParsedURL,
    ParseError,
    QueryParam,
    ResolutionError,
    UnrecognizedSuffixError,
    URLParser,
    parse_url,
)

__version__ = "0.1.0"

__all__ = [
    "URLParser",
    "ParsedURL",
    "QueryParam",
    "ParseError",
    "MalformedPortError",
    "UnrecognizedSuffixError",
    "ResolutionError",
    "parse_url",
]
