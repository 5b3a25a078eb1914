"""
Errors raised while decomposing a URL.

All errors subclass ValueError and carry the stage that failed, so callers
can tell a bad port from an unknown suffix from a failed lookup.
"""


class DomainerError(ValueError):
    """Base class for all domainer failures."""

    stage = "unknown"

    def __init__(self, message: str, value: str = ""):
        super().__init__(message)
        self.value = value


class ParseError(DomainerError):
    """The input could not be decomposed."""


class MalformedPortError(ParseError):
    """The text after ':' in the authority is not a base-10 integer."""

    stage = "port"


class UnrecognizedSuffixError(ParseError):
    """No registrable domain could be derived from the host."""

    stage = "suffix"


class ResolutionError(DomainerError):
    """The hostname did not resolve to any address."""

    stage = "resolution"
