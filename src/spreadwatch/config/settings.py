"""
Application settings with environment variable support.

Uses Pydantic Settings for type-safe configuration with automatic
environment variable loading and validation. The settings object is
built once at startup and handed to every component.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spreadwatch.utils.memory import parse_ram_limit


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Sensitive values use SecretStr for safe handling.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # =========================================================================
    # Server
    # =========================================================================

    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to",
    )

    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port the HTTP server listens on",
    )

    secret_token: SecretStr = Field(
        default=SecretStr("777"),
        description="Shared secret expected in the `token` query parameter",
    )

    # =========================================================================
    # Home Exchange Credentials
    # =========================================================================

    mexc_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="MEXC API key for the asset-configuration endpoint",
    )
    mexc_api_secret: SecretStr = Field(
        default=SecretStr(""),
        description="MEXC API secret for signing requests",
    )

    # =========================================================================
    # Dashboard
    # =========================================================================

    poll_interval_ms: int = Field(
        default=500,
        ge=100,
        le=60_000,
        description="Client polling interval in milliseconds",
    )

    deposit_fail_open: bool = Field(
        default=True,
        description=(
            "Deposit status reported when it cannot be determined "
            "(no credentials, upstream error, unknown symbol)"
        ),
    )

    # =========================================================================
    # Resource Limits
    # =========================================================================

    cpu_cores: float = Field(
        default=1.0,
        gt=0.0,
        description="CPU cores allotted to the pod, used to normalize load average",
    )

    ram_limit: str = Field(
        default="512Mi",
        description="Memory limit of the pod (e.g. 512Mi, 1Gi, or plain megabytes)",
    )

    pod_ip: str = Field(
        default="local",
        description="Identifier shown in the dashboard status line",
    )

    # =========================================================================
    # Operation Mode
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("ram_limit", mode="after")
    @classmethod
    def validate_ram_limit(cls, v: str) -> str:
        """Ensure the RAM limit parses."""
        parse_ram_limit(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def has_credentials(self) -> bool:
        """Check whether both halves of the MEXC key pair are set."""
        return bool(
            self.mexc_api_key.get_secret_value() and self.mexc_api_secret.get_secret_value()
        )

    @property
    def ram_limit_bytes(self) -> int:
        """RAM limit in bytes."""
        return parse_ram_limit(self.ram_limit)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded only once.
    Clear cache with `get_settings.cache_clear()` if needed.
    """
    return Settings()
