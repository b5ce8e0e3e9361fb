"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Upload constraints shared by every processing path
ALLOWED_FILE_TYPES = ("text/csv", "application/pdf")
ALLOWED_FILE_EXTENSIONS = (".csv", ".pdf")

# Shorter descriptions are treated as noise on statement lines
MIN_DESCRIPTION_LENGTH = 3


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # Application
    app_name: str = Field(default="Subscription Spending Analyzer", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    
    # Upload limits
    max_file_size_mb: int = Field(default=10, alias="MAX_FILE_SIZE_MB")
    max_pdf_pages: int = Field(default=50, alias="MAX_PDF_PAGES")
    
    # Statement lines above this magnitude are running balances, not charges
    max_transaction_amount: float = Field(default=100000.0, alias="MAX_TRANSACTION_AMOUNT")
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper
    
    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        return v
    
    @field_validator("max_file_size_mb", "max_pdf_pages")
    @classmethod
    def validate_positive_limit(cls, v):
        """Upload limits must allow at least one unit."""
        if v < 1:
            raise ValueError("Limit must be at least 1")
        return v
    
    @field_validator("max_transaction_amount")
    @classmethod
    def validate_amount_limit(cls, v):
        if v <= 0:
            raise ValueError("Max transaction amount must be positive")
        return v
    
    @property
    def max_file_size_bytes(self) -> int:
        """Upload ceiling in bytes."""
        return self.max_file_size_mb * 1024 * 1024


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.
    
    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
