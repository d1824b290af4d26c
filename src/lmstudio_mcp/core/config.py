"""Process-start configuration for the LM Studio MCP server."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "http://localhost:1234"
BASE_URL_ENV_VAR = "LM_STUDIO_BASE_URL"


class ServerConfig(BaseModel):
    """
    Settings read once when the process starts.

    Attributes:
        base_url: Root URL of the LM Studio server, without a trailing slash.
    """

    model_config = {"frozen": True}

    base_url: str = Field(default=DEFAULT_BASE_URL)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base_url must not be empty")
        return value.rstrip("/")

    @classmethod
    def from_env(cls, base_url: Optional[str] = None, use_dotenv: bool = True) -> "ServerConfig":
        """Build the configuration from the environment.

        Args:
            base_url: Explicit override (e.g. from the command line). Wins over the environment.
            use_dotenv: Whether to load a ``.env`` file before reading the environment.

        Returns:
            The resolved configuration.
        """
        if use_dotenv:
            load_dotenv()

        resolved = base_url or os.getenv(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
        return cls(base_url=resolved)
