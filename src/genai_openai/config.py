"""Configuration: frozen Config with credential auto-resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv
import httpx

from genai_openai.errors import ConfigurationError

load_dotenv()

API_KEY_ENV_VAR = "OPENAI_API_KEY"


@dataclass(frozen=True)
class Config:
    """Immutable configuration for the OpenAI model registry.

    The API key is auto-resolved from ``OPENAI_API_KEY`` when not passed
    explicitly.

    Example:
        config = Config()  # key from OPENAI_API_KEY
        config = Config(api_key="sk-...", timeout_s=30)
    """

    #: Auto-resolved from ``OPENAI_API_KEY`` when *None*.
    api_key: str | None = None
    base_url: str | None = None
    organization: str | None = None
    timeout_s: float = 60.0

    def __post_init__(self) -> None:
        """Auto-resolve API key and validate configuration."""
        if self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
                hint="This bounds each outbound Chat Completions call.",
            )

        if not self.api_key:
            object.__setattr__(self, "api_key", os.environ.get(API_KEY_ENV_VAR))

        if not self.api_key:
            raise ConfigurationError(
                "OpenAI requires an API key",
                hint=(
                    f"Set {API_KEY_ENV_VAR} in the environment or pass "
                    "Config(api_key=...). You can get an API key at "
                    "https://platform.openai.com/api-keys"
                ),
            )

    def http_timeout(self) -> httpx.Timeout:
        """Timeout object handed to the vendor client."""
        return httpx.Timeout(self.timeout_s)

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(api_key={'[REDACTED]' if self.api_key else None}, "
            f"base_url={self.base_url!r}, organization={self.organization!r}, "
            f"timeout_s={self.timeout_s})"
        )

    __repr__ = __str__
