"""Configuration management for the branchreview application."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Uses BRANCHREVIEW_ prefix for all environment variables.
    Supports loading from .env file.

    Examples:
        BRANCHREVIEW_DEBUG=true
        BRANCHREVIEW_PORT=3001
        BRANCHREVIEW_OLLAMA_MODEL=codellama
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BRANCHREVIEW_",
        case_sensitive=False,
    )

    # Server configuration
    host: str = Field(
        default="127.0.0.1",
        description="Server host address",
    )
    port: Optional[int] = Field(
        default=None,
        description="Server port (auto-assigned if not specified)",
        ge=1,
        le=65535,
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level used when debug mode is off",
    )

    # Ollama configuration
    ollama_url: str = Field(
        default="http://localhost:11434",
        description="Base URL of the Ollama server",
    )
    ollama_model: str = Field(
        default="llama2",
        description="Model used for the review",
    )
    ollama_timeout: float = Field(
        default=300.0,
        description="Timeout in seconds for a generate request",
        gt=0,
    )

    # Size limits
    prompt_diff_chars: int = Field(
        default=8000,
        description="Number of diff characters embedded in the review prompt",
        ge=0,
    )
    excerpt_limit: int = Field(
        default=1000,
        description="Maximum length of the raw diff excerpt kept per file",
        ge=0,
    )
    max_diff_size: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum diff size in bytes",
        ge=1,
    )


# Global settings instance
settings = Settings()
