"""Run settings for the SendGrid template exporter.

This module validates the command-line options of a single export run
and derives the objects the exporter is built from.
"""

import os
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, ValidationError, field_validator

from .client import SENDGRID_HOST
from .exceptions import ConfigError, WorkingDirectoryError
from .store import StorePolicy


class ExportSettings(BaseModel):
    """Effective settings of an export run."""

    api_key: str = Field(..., description="SendGrid API key (not the API Key ID)")
    base_dir: str = Field(..., description="Directory the templates are written to")
    host: str = Field(default=SENDGRID_HOST, description="SendGrid API base URL")
    timeout: Optional[float] = Field(default=None, description="Request timeout in seconds")
    include_plain: bool = Field(default=False, description="Also write plain-text content")
    overwrite: bool = Field(default=False, description="Overwrite existing files")
    all_versions: bool = Field(default=False, description="Export every version, not just the active one")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate the API key is not blank."""
        v = v.strip()
        if not v:
            raise ValueError("API key must not be empty")
        return v

    @field_validator("base_dir")
    @classmethod
    def validate_base_dir(cls, v: str) -> str:
        """Normalize the output directory."""
        if not v.strip():
            raise ValueError("Base dir must not be empty")
        return os.path.normpath(v)

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate host is an http(s) URL."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Host must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Validate timeout value."""
        if v is not None and v <= 0:
            raise ValueError("Timeout must be greater than 0")
        return v

    @classmethod
    def from_options(
        cls,
        api_key: str,
        base_dir: Optional[str] = None,
        **kwargs,
    ) -> "ExportSettings":
        """Build settings from CLI options.

        A blank base dir resolves to the current working directory.

        Raises:
            WorkingDirectoryError: If the working directory cannot be resolved
            ConfigError: If an option is invalid
        """
        if base_dir is None or not base_dir.strip():
            try:
                base_dir = os.getcwd()
            except OSError as e:
                raise WorkingDirectoryError(f"Cannot resolve current directory: {e}") from e

        try:
            return cls(api_key=api_key, base_dir=base_dir, **kwargs)
        except ValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise ConfigError(f"Invalid settings: {messages}") from e

    def store_policy(self) -> StorePolicy:
        """Return the file store policy for these settings."""
        return StorePolicy(
            include_plain=self.include_plain,
            overwrite_existing=self.overwrite,
            all_versions=self.all_versions,
        )

    def masked_api_key(self) -> str:
        """Return the API key with all but its first and last three characters hidden."""
        if len(self.api_key) <= 6:
            return "*" * len(self.api_key)
        return self.api_key[:3] + "*" * (len(self.api_key) - 6) + self.api_key[-3:]
