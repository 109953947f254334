from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"colored", "json", "plain"}


class Settings(BaseSettings):
    """
    Application settings loaded with Pydantic BaseSettings.

    Values come from environment variables or a local .env file.
    """

    PROJECT_NAME: str = "Storefront"
    VERSION: str = "0.1.0"

    # Application Settings
    ENVIRONMENT: str = Field("development", description="Deployment environment name")
    DEBUG: bool = Field(False, description="Enable debug mode")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("colored", description="Console log format: colored, json or plain")
    LOG_FILE: str | None = Field(None, description="Optional path for JSON file logging")

    # Catalog
    LOW_STOCK_THRESHOLD: int = Field(10, description="Available quantity at or below which a SKU is low on stock")

    # Orders
    ORDER_NUMBER_MAX_ATTEMPTS: int = Field(
        5, description="Attempts to draw an unused order number before giving up"
    )

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            value = value.strip().upper()
            if value not in _LOG_LEVELS:
                raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return value

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            if value not in _LOG_FORMATS:
                raise ValueError(f"LOG_FORMAT must be one of {sorted(_LOG_FORMATS)}")
        return value

    @field_validator("LOW_STOCK_THRESHOLD")
    @classmethod
    def validate_low_stock_threshold(cls, v):
        if v < 0:
            raise ValueError("LOW_STOCK_THRESHOLD must be 0 or greater")
        return v

    @field_validator("ORDER_NUMBER_MAX_ATTEMPTS")
    @classmethod
    def validate_order_number_attempts(cls, v):
        if v < 1:
            raise ValueError("ORDER_NUMBER_MAX_ATTEMPTS must be at least 1")
        return v

    @computed_field
    @property
    def is_development(self) -> bool:
        """Whether the app runs in a development environment"""
        return self.DEBUG or self.ENVIRONMENT.lower() in ["development", "dev", "local"]


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached settings instance.

    Environment variables are read only once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
