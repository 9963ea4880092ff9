"""Configuration settings for hookline plugin resolution.

This module defines a Pydantic ``BaseSettings`` model used to configure the
resolver via environment variables and a ``.env`` file. Environment variables
are read with the ``HOOKLINE_`` prefix (case-insensitive), and field
descriptions serve as the authoritative documentation for each setting.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("quiet", "info", "verbose", "veryVerbose")


class Settings(BaseSettings):
    """Plugin resolution settings with environment variable support.

    Notes:
    - Values can be provided via environment variables with prefix
      ``HOOKLINE_`` (e.g., ``HOOKLINE_LOG_LEVEL=verbose``), or from a ``.env``
      file.
    - The naming conventions and bundled-plugin template here decide which
      candidate locations the resolver tries for a short identifier.
    """

    log_level: str = Field(
        default="info",
        description="Host logger level: quiet, info, verbose or veryVerbose",
    )

    vendor_prefix: str = Field(
        default="hookline-plugin-",
        description="Prefix for user-authored plugin packages",
    )
    official_scope: str = Field(
        default="@hookline-plugins", description="Scope of official plugins"
    )
    canary_scope: str = Field(
        default="@hookline-canary", description="Scope of canary plugin builds"
    )

    bundled_offset: str = Field(
        default="..",
        description="Offset from the hookline install directory to the bundle root",
    )
    bundled_plugins_dir: str = Field(
        default="plugins", description="Directory holding bundled plugins"
    )
    bundled_entry: str = Field(
        default="__init__.py", description="Entry file inside a bundled plugin"
    )

    default_export: str = Field(
        default="default",
        description="Attribute holding the plugin constructor on a resolved module",
    )
    extended_location: Optional[str] = Field(
        default=None, description="Extra directory searched by the module loader"
    )
    enable_plugin_validation: bool = Field(
        default=True, description="Check constructed plugins expose name and apply"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is one the host logger understands.

        Args:
            value: Level name supplied via settings/env (e.g., "verbose").

        Returns:
            The validated level name.

        Raises:
            ValueError: If the level is not one of the supported options.
        """
        if value not in LOG_LEVELS:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported levels: {', '.join(LOG_LEVELS)}"
            )
        return value

    @field_validator("official_scope", "canary_scope")
    @classmethod
    def validate_scope(cls, value: str) -> str:
        """Ensure a scope looks like ``@name`` with no path separator."""
        if not value.startswith("@") or len(value) < 2 or "/" in value:
            raise ValueError(f"Scope must look like '@name', got: {value!r}")
        return value

    @field_validator("vendor_prefix", "bundled_plugins_dir", "bundled_entry")
    @classmethod
    def validate_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Value cannot be empty")
        return value

    model_config = {
        "env_file": ".env",
        "env_prefix": "HOOKLINE_",
        "case_sensitive": False,
        "validate_assignment": True,
        "extra": "ignore",
    }
