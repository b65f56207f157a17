"""Client configuration.

- `PayPalSettings` reads values from keyword arguments or `PAYPAL_*`
  environment variables (pydantic-settings). No config file is read.
- `Configuration` is the immutable view every request uses: credentials, API
  version and the resolved environment.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """The PayPal environment requests are sent to."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def domain(self) -> str:
        if self is Environment.PRODUCTION:
            return "https://api.paypal.com"
        return "https://api.sandbox.paypal.com"

    @classmethod
    def from_bool(cls, production: bool) -> "Environment":
        return cls.PRODUCTION if production else cls.SANDBOX


class APIVersion(str, Enum):
    V1 = "v1"
    V2 = "v2"


class PayPalSettings(BaseSettings):
    """Settings supplied by the embedding application."""

    model_config = SettingsConfigDict(
        env_prefix="PAYPAL_",
        extra="ignore",
        case_sensitive=False,
    )

    client_id: str = Field(
        ...,
        min_length=1,
        description="Client ID of the PayPal REST app.",
    )
    client_secret: str = Field(
        ...,
        min_length=1,
        description="Client secret of the PayPal REST app.",
    )
    version: APIVersion = Field(
        default=APIVersion.V1,
        description="Version of the REST API used by the controllers.",
    )
    production: bool = Field(
        default=False,
        description="Send requests to the live API instead of the sandbox.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="paypal-api/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    log_api_error: bool = Field(
        default=False,
        description="Log failed request/response pairs (PAYPAL_LOG_API_ERROR).",
    )
    log_level: str = Field(default="INFO", description="Level used by `configure_logging`.")
    log_json: bool = Field(default=False, description="Render logs as JSON lines.")


class Configuration(BaseModel):
    """Credentials, API version and environment. Never mutated once built."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    secret: str = Field(..., min_length=1, repr=False)
    version: APIVersion = APIVersion.V1
    environment: Environment = Environment.SANDBOX

    @classmethod
    def from_settings(cls, settings: PayPalSettings) -> "Configuration":
        return cls(
            id=settings.client_id,
            secret=settings.client_secret,
            version=settings.version,
            environment=Environment.from_bool(settings.production),
        )

    @property
    def base_url(self) -> str:
        return self.environment.domain
