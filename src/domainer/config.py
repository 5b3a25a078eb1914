"""
Configuration management for domainer.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SuffixConfig(BaseSettings):
    """Configuration for the public suffix lookup."""

    psl_file: Optional[Path] = Field(
        default=None,
        description=(
            "Path to a public_suffix_list.dat file. "
            "Uses the list bundled with publicsuffixlist when unset."
        ),
    )
    only_icann: bool = Field(
        default=False, description="Ignore the PRIVATE section of the list"
    )

    model_config = SettingsConfigDict(env_prefix="SUFFIX_")


class ResolverConfig(BaseSettings):
    """Configuration for hostname resolution."""

    lifetime: float = Field(
        default=5.0, description="Total seconds allowed for one DNS lookup"
    )
    nameservers: Optional[list[str]] = Field(
        default=None, description="Nameserver addresses (system resolv.conf if unset)"
    )

    model_config = SettingsConfigDict(env_prefix="RESOLVER_")


class APIConfig(BaseSettings):
    """Configuration for the HTTP server."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    model_config = SettingsConfigDict(env_prefix="API_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    suffix: SuffixConfig = Field(default_factory=SuffixConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    api: APIConfig = Field(default_factory=APIConfig)

    # Global settings
    resolve_ip: bool = Field(
        default=False, description="Resolve the hostname when parse_url is not told"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
