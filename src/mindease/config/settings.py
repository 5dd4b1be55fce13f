"""
MindEase Application Settings

Configuration management using Pydantic Settings.
All sensitive values are loaded from environment variables.

SECURITY: Never log or expose settings containing secrets.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Token values treated as "not configured"
PLACEHOLDER_TOKENS: frozenset[str] = frozenset({"", "CHANGE_ME", "your_token_here"})


class EnrichmentSettings(BaseSettings):
    """
    Remote emotion/sentiment enrichment configuration.

    Enrichment is best-effort. When disabled or misconfigured the
    classifiers run purely on local rules with confidence 0.
    """

    model_config = SettingsConfigDict(env_prefix="MINDEASE_ENRICHMENT_")

    enabled: bool = Field(default=False, description="Use the remote enrichment source")
    api_token: SecretStr = Field(default=SecretStr(""), description="HuggingFace API token")
    base_url: str = Field(
        default="https://api-inference.huggingface.co",
        description="Inference API base URL",
    )
    emotion_model: str = Field(
        default="SamLowe/roberta-base-go_emotions",
        description="Emotion classification model identifier",
    )
    sentiment_model: Optional[str] = Field(
        default="cardiffnlp/twitter-roberta-base-sentiment-latest",
        description="Sentiment model identifier (None disables the sentiment call)",
    )
    timeout_seconds: float = Field(default=3.0, gt=0.0, le=30.0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def is_usable(self) -> bool:
        """Enrichment is usable only when enabled and a real token is set."""
        if not self.enabled:
            return False
        return self.api_token.get_secret_value().strip() not in PLACEHOLDER_TOKENS


class SafetySettings(BaseSettings):
    """Crisis response configuration."""

    model_config = SettingsConfigDict(env_prefix="MINDEASE_SAFETY_")

    helpline_country: str = Field(default="IN", description="ISO code for helpline lookup")
    helpline_config_path: Optional[str] = Field(
        default=None,
        description="Optional JSON file overriding built-in helplines",
    )


class MonitoringSettings(BaseSettings):
    """Error tracking configuration."""

    model_config = SettingsConfigDict(env_prefix="MINDEASE_")

    sentry_dsn: str = Field(default="", description="Sentry DSN (empty disables tracking)")
    sentry_traces_sample_rate: float = Field(default=0.0, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """
    Main application settings.

    All configuration is loaded from environment variables with MINDEASE_ prefix.
    Sensitive values use SecretStr to prevent accidental logging.

    Usage:
        settings = get_settings()
        if settings.enrichment.is_usable():
            ...
    """

    model_config = SettingsConfigDict(
        env_prefix="MINDEASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )

    # Nested settings
    enrichment: EnrichmentSettings = Field(default_factory=EnrichmentSettings)
    safety: SafetySettings = Field(default_factory=SafetySettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are only loaded once.
    For testing, construct Settings directly and inject it.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
