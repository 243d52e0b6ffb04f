"""Application configuration, loaded once at startup."""

import os
from dataclasses import dataclass
from typing import Optional

from models.model_config import DEFAULT_MODEL, DEFAULT_MAX_TOKENS

ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"

# the original frontend read its key from a Vite build variable
API_KEY_ENV_VARS = ("ANTHROPIC_API_KEY", "VITE_ANTHROPIC_API_KEY")


@dataclass(frozen=True)
class AppConfig:
    """Immutable settings for the completion service call."""
    api_key: str = ""
    api_url: str = ANTHROPIC_API_URL
    api_version: str = ANTHROPIC_VERSION
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: Optional[float] = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ=None) -> "AppConfig":
        """Build the config from environment variables.

        A missing API key is not an error here; the service rejects the
        request later and the analysis fails like any other call.
        """
        env = os.environ if environ is None else environ

        api_key = ""
        for name in API_KEY_ENV_VARS:
            if env.get(name):
                api_key = env[name].strip()
                break

        timeout = env.get("ANALYSIS_TIMEOUT")

        return cls(
            api_key=api_key,
            api_url=env.get("ANTHROPIC_API_URL", ANTHROPIC_API_URL),
            model=env.get("ANALYSIS_MODEL", DEFAULT_MODEL),
            timeout=float(timeout) if timeout else None,
        )
