"""Configuration settings for the Bitbucket REST API client."""

import re
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ApiVersionSetting = Literal["1.0", "2.0"]

_VERSION_SEGMENT = re.compile(r"/\d+\.\d+$")


def strip_version_segment(endpoint: str) -> str:
    """Drop trailing slashes and a trailing version segment such as '/1.0'."""
    return _VERSION_SEGMENT.sub("", endpoint.rstrip("/"))


class HttpConfig(BaseModel):
    """Configuration for the underlying HTTP transport.

    Only the knobs the client passes straight to httpx; retries and
    pooling stay with httpx itself.
    """

    timeout_s: float = Field(
        default=20.0,
        gt=0.0,
        description="Request timeout in seconds",
    )
    user_agent: str = Field(
        default="bitbucket-rest-api/0.1",
        description="User-Agent header sent with every request",
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --------------------------------------------------------------------------
    # Bitbucket API
    # --------------------------------------------------------------------------
    bitbucket_endpoint: str = Field(
        default="https://api.bitbucket.org",
        description="API base URL; a trailing version segment is dropped",
    )
    bitbucket_api_version: ApiVersionSetting = Field(
        default="1.0",
        description="Default API version for resource families without an override",
    )
    bitbucket_username: str = Field(
        default="",
        description="Username for HTTP basic auth",
    )
    bitbucket_password: str = Field(
        default="",
        description="App password for HTTP basic auth",
    )
    bitbucket_token: str = Field(
        default="",
        description="OAuth access token (takes precedence over basic auth)",
    )

    # --------------------------------------------------------------------------
    # Client-wide defaults
    # --------------------------------------------------------------------------
    default_user: str | None = Field(
        default=None,
        description="Repository owner used when a call omits one",
    )
    default_repo: str | None = Field(
        default=None,
        description="Repository slug used when a call omits one",
    )

    # --------------------------------------------------------------------------
    # Application
    # --------------------------------------------------------------------------
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # --------------------------------------------------------------------------
    # HTTP Transport
    # --------------------------------------------------------------------------
    http: HttpConfig = Field(
        default_factory=HttpConfig,
        description="HTTP transport configuration",
    )

    @property
    def has_credentials(self) -> bool:
        """Whether any form of authentication is configured."""
        return bool(self.bitbucket_token or (self.bitbucket_username and self.bitbucket_password))

    @field_validator("bitbucket_endpoint")
    @classmethod
    def _strip_endpoint_version(cls, value: str) -> str:
        """Accept endpoints written with a version, e.g. https://api.bitbucket.org/1.0."""
        return strip_version_segment(value)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
