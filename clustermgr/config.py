"""Configuration management for clustermgr."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from .errors import ConfigError

DEFAULT_API_URL = "https://api.openshift.com"


class Config(BaseModel):
    """Connection and logging settings with sensible defaults."""

    api_url: str = DEFAULT_API_URL
    token: Optional[str] = None
    api_timeout: float = 30.0
    aws_profile: Optional[str] = None
    aws_region: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Build configuration from the environment and an optional .env file."""
        load_dotenv()

        timeout = os.getenv("CLUSTERMGR_API_TIMEOUT", "30")
        try:
            api_timeout = float(timeout)
        except ValueError:
            raise ConfigError(f"CLUSTERMGR_API_TIMEOUT must be a number of seconds, got '{timeout}'")

        return cls(
            api_url=os.getenv("CLUSTERMGR_API_URL", DEFAULT_API_URL).rstrip("/"),
            token=os.getenv("CLUSTERMGR_TOKEN") or None,
            api_timeout=api_timeout,
            aws_profile=os.getenv("AWS_PROFILE") or None,
            aws_region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or None,
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate_connection(self) -> None:
        """Validate the settings required to talk to the management API."""
        missing = []
        if not self.api_url:
            missing.append("CLUSTERMGR_API_URL")
        if not self.token:
            missing.append("CLUSTERMGR_TOKEN")
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")
