"""
Configuration Management Module

This module handles all application configuration using Pydantic Settings.
Configuration is loaded from environment variables with strong typing and validation.

Both the review proxy and the editor UI read from the same settings object;
the UI only needs the proxy URL, so the vendor key is optional here and
checked at proxy startup instead.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The vendor API key is loaded from the environment only,
    never hardcoded or logged.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # =========================================================================
    # AI Vendor Configuration
    # =========================================================================
    google_gemini_key: Optional[str] = Field(
        default=None,
        description="API key for the hosted generative-AI model"
    )

    ai_model: str = Field(
        default="gemini-2.0-flash",
        description="Model used for code review"
    )

    ai_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        description="OpenAI-compatible endpoint of the AI vendor"
    )

    # =========================================================================
    # Server Configuration
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port to bind the server"
    )

    cors_allow_origins: str = Field(
        default="*",
        description="Comma-separated origins allowed to call the API"
    )

    # =========================================================================
    # Editor UI Configuration
    # =========================================================================
    review_api_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL of the review proxy used by the UI"
    )

    ui_request_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Seconds the UI waits for a review"
    )

    # =========================================================================
    # Logging Configuration
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    log_json_format: bool = Field(
        default=True,
        description="Enable JSON logging format"
    )

    log_requests: bool = Field(
        default=False,
        description="Enable request/response logging"
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("review_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # =========================================================================
    # Computed Properties
    # =========================================================================
    @property
    def cors_origins_list(self) -> List[str]:
        """Get list of allowed CORS origins."""
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

    def get_api_key(self) -> str:
        """
        Get the AI vendor API key.

        Returns:
            API key as string

        Raises:
            ValueError: If the key is not configured
        """
        if self.google_gemini_key and self.google_gemini_key.strip():
            return self.google_gemini_key.strip()

        raise ValueError(
            "AI vendor API key not configured. Set GOOGLE_GEMINI_KEY"
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings instance
    """
    return Settings()
