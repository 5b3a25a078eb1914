"""
API response models.

Pydantic mirrors of ParsedURL for the HTTP layer.
"""

from pydantic import BaseModel, Field

from domainer.parsing import ParsedURL


class QueryParamItem(BaseModel):
    """A single query string pair."""

    key: str = Field(..., description="Query parameter name")
    value: str = Field(..., description="Query parameter value, not decoded")


class ParsedURLResponse(BaseModel):
    """Response for GET /v1/parse."""

    full_url: str = Field(..., description="The URL exactly as submitted")
    protocol: str = Field("", description="'http', 'https' or empty")
    subdomain: str = Field("", description="Labels left of the domain")
    hostname: str = Field("", description="Registrable domain (eTLD+1)")
    domain: str = Field("", description="Label left of the TLD")
    tld: str = Field("", description="Public suffix, possibly multi-label")
    port: int = Field(0, description="Port number, 0 when absent")
    path: str = Field("", description="Path including leading '/'")
    query: list[QueryParamItem] = Field(
        default_factory=list, description="Query pairs in original order"
    )
    fragment: str = Field("", description="Text after '#'")
    username: str = Field("", description="Username from userinfo")
    password: str = Field("", description="Password from userinfo")
    ip_address: str | None = Field(
        None, description="Resolved address (only when resolve=true)"
    )

    @classmethod
    def from_parsed(cls, parsed: ParsedURL) -> "ParsedURLResponse":
        return cls(**parsed.to_dict())
