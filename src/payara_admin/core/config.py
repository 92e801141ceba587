"""Configuration management for Payara Admin Client."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from payara_admin.core.exceptions import ConfigurationError

ADMIN_PATH = "__asadmin"
LOG_FORMATS = ("json", "console")


class Settings(BaseSettings):
    """Client configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PAYARA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Administration endpoint
    host: str = Field("localhost", description="Administration server host")
    admin_port: int = Field(4848, description="Administration HTTP port")
    secure: bool = Field(False, description="Use HTTPS for administration requests")

    # Transport
    request_timeout_seconds: float = Field(300.0, description="Read/write timeout for admin requests")
    connect_timeout_seconds: float = Field(10.0, description="Connect timeout for admin requests")
    spool_max_memory_mb: int = Field(
        16,
        gt=0,
        description="Request body size kept in memory before spooling to disk",
    )
    user_agent: str = Field("payara-admin-client/0.1.0", description="User-Agent header value")

    # Observability
    log_level: str = Field("INFO")
    log_format: str = Field("json")

    @field_validator("admin_port")
    @classmethod
    def check_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError(f"admin_port must be between 1 and 65535, got: {v}")
        return v

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}, got: {v}")
        return v

    @property
    def base_url(self) -> str:
        """Root URL of the administration interface."""
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.host}:{self.admin_port}"

    @property
    def spool_max_memory_bytes(self) -> int:
        return self.spool_max_memory_mb * 1024 * 1024

    def admin_url(self, command_name: str) -> str:
        """URL of an administration command, without query string."""
        if not command_name:
            raise ConfigurationError("Administration command name is required")
        return f"{self.base_url}/{ADMIN_PATH}/{command_name}"
