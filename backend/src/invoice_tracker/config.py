"""
Application configuration loaded from environment variables.

All configuration is validated at startup to fail fast on misconfiguration.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LokiIntegrations(BaseModel):
    """
    Loki Mode integration flags.

    Only their presence and value are defined; what each integration
    does is out of scope for the POC.
    """
    jurisdiction: bool = True
    checkpoints: bool = True
    verification: bool = True


class LokiSettings(BaseModel):
    """Loki Mode block, mirrors [tool.loki] in pyproject.toml."""
    integrations: LokiIntegrations = Field(default_factory=LokiIntegrations)


class Settings(BaseSettings):
    """
    Application settings with validation.

    All settings are loaded from environment variables with the same name.
    Nested values use a double underscore, e.g. LOKI__INTEGRATIONS__CHECKPOINTS.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Page shell
    app_title: str = Field(
        default="Invoice Tracker POC",
        description="Heading shown in the page header",
    )
    footer_text: str = Field(
        default="Loki Mode POC - Demonstrating Framework Integration",
        description="Text shown in the page footer",
    )

    # Integrations
    loki: LokiSettings = Field(
        default_factory=LokiSettings,
        description="Loki Mode integration flags",
    )

    # Server
    debug: bool = Field(
        default=False,
        description="Enable debug mode with API docs and detailed error messages"
    )
    allowed_origins: list[str] = Field(
        default=["http://localhost:5173"],
        description="CORS origins allowed outside debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level",
    )

    @property
    def enabled_integrations(self) -> list[str]:
        """Names of the Loki integrations that are switched on."""
        flags = self.loki.integrations.model_dump()
        return [name for name, enabled in flags.items() if enabled]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once at startup and cached for subsequent calls.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
