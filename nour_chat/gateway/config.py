"""Gateway configuration with environment variable loading.

Pydantic-based configuration for the Gemini response gateway.
The credential is read once, when the configuration is created.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-3-flash-preview"


def _timeout_from_env() -> str | None:
    return os.getenv("GEMINI_TIMEOUT")


class GatewayConfig(BaseModel):
    """Configuration for the Gemini response gateway.

    Attributes:
        api_key: Google AI API key. May be blank; calls then degrade to
            the connection-error fallback instead of failing at startup.
        model_name: Gemini model identifier.
        temperature: Sampling temperature sent with every request.
        request_timeout: Optional limit in seconds for one call.
            None leaves the transport defaults untouched.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", ""),
        description="API key for Google Gemini",
        validate_default=True,
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    request_timeout: float | None = Field(
        default_factory=_timeout_from_env,
        gt=0.0,
        description="Seconds to wait for one model call (None = no limit)",
        validate_default=True,
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()

    @field_validator("request_timeout", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, v: object) -> object:
        """Treat an unset or blank GEMINI_TIMEOUT as no limit."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_api_key(self) -> bool:
        """Whether a credential is configured."""
        return bool(self.api_key)


def get_gateway_config() -> GatewayConfig:
    """Create gateway configuration from environment.

    Returns:
        Configured GatewayConfig instance.
    """
    return GatewayConfig()
