"""
API serving layer.

Exposes URL decomposition over HTTP.
"""

from domainer.api.models import ParsedURLResponse, QueryParamItem
from domainer.api.server import app

__all__ = [
    "ParsedURLResponse",
    "QueryParamItem",
    "app",
]
