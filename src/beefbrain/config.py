"""Configuration management for Beef Brain using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from beefbrain.render.policy import DEFAULT_FLOW_STYLE_PATHS, FlowStylePolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="BEEFBRAIN_",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    # Rendering
    flow_style_paths: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FLOW_STYLE_PATHS),
        description="Dotted path patterns rendered in compact flow style",
    )

    def flow_style_policy(self) -> FlowStylePolicy:
        """Build the serializer policy from the configured path patterns."""
        return FlowStylePolicy(tuple(self.flow_style_paths))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
