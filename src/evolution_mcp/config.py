#!/usr/bin/env python3
"""
Configuration for the Evolution API MCP Server
Loads the gateway address and API key from the environment (or a .env file)

The API token is the only required setting. A missing or empty token is a
startup-fatal condition: load_settings() raises ConfigurationError and the
server refuses to start.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://evolution.digitalprofits.com.br"
TOKEN_ENV_VAR = "EVOLUTION_API_TOKEN"


class Settings(BaseSettings):
    """Configuration settings for the Evolution API MCP server"""

    EVOLUTION_API_TOKEN: str = Field(
        description="API key sent as the 'apikey' header on every gateway request"
    )

    EVOLUTION_API_BASE_URL: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Evolution API gateway"
    )

    # None keeps httpx from imposing a timeout of its own
    EVOLUTION_API_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Timeout in seconds for gateway requests (unset = no timeout)"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    @field_validator("EVOLUTION_API_TOKEN")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Reject empty tokens the same way as a missing variable"""
        if not v:
            raise ValueError(f"{TOKEN_ENV_VAR} must not be empty")
        return v

    @field_validator("EVOLUTION_API_BASE_URL")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure base URL doesn't end with trailing slash"""
        return v.rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


def load_settings(**overrides: Any) -> Settings:
    """
    Load settings once at process start

    Args:
        overrides: Explicit values taking precedence over the environment

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If the API token is missing or empty, or any
            other setting fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        if TOKEN_ENV_VAR in fields:
            raise ConfigurationError(
                f"{TOKEN_ENV_VAR} environment variable is required"
            ) from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def get_config_summary(settings: Settings) -> Dict[str, Any]:
    """Get a summary of current configuration for debugging (token excluded)"""
    return {
        "base_url": settings.EVOLUTION_API_BASE_URL,
        "api_token_configured": bool(settings.EVOLUTION_API_TOKEN),
        "http_timeout": settings.EVOLUTION_API_TIMEOUT,
        "log_level": settings.LOG_LEVEL,
    }
