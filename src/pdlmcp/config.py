"""
Startup configuration for the People Data Labs MCP server.

Settings are read once from the environment (and an optional .env file)
and passed explicitly to the client, dispatcher and front-ends.
"""
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.peopledatalabs.com/v5"


class Settings(BaseModel):
    """Immutable runtime settings."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, description="People Data Labs API key")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="PDL API base URL")
    timeout: float = Field(default=30.0, gt=0, description="Outbound request timeout in seconds")
    log_level: str = Field(default="INFO", description="Package log level")
    host: str = Field(default="0.0.0.0", description="Bind host for the HTTP front-end")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port for the HTTP front-end")


def load_settings(env_path: Path | None = None) -> Settings:
    """Load settings from environment variables and a .env file.

    Args:
        env_path: Optional explicit .env location. When None, python-dotenv
            searches from the current working directory upwards.

    Raises:
        ConfigurationError: If PDL_API_KEY is missing or a value is malformed.
    """
    load_dotenv(env_path or find_dotenv(usecwd=True))

    api_key = os.environ.get("PDL_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("PDL_API_KEY environment variable is required")

    values: dict[str, str] = {"api_key": api_key}
    for env_name, field_name in (
        ("PDL_BASE_URL", "base_url"),
        ("PDL_TIMEOUT", "timeout"),
        ("PDL_LOG_LEVEL", "log_level"),
        ("PDL_HOST", "host"),
        ("PDL_PORT", "port"),
    ):
        raw = os.environ.get(env_name)
        if raw:
            values[field_name] = raw

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
