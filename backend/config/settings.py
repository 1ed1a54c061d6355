"""
Configuration management system for the Unit Master service.

This module provides:
- Environment-specific configuration (dev/staging/prod/testing)
- Pydantic-based settings validation
- Centralized configuration access
"""

import os
from enum import Enum
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

from helpers.constants import AppConstants
from helpers.file_helper import ALLOWED_FILE_EXTENSIONS, MAX_FILE_SIZE_IN_BYTES

BYTES_PER_MB = 1024 * 1024


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Available log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class UploadSettings(BaseSettings):
    """File upload configuration settings."""

    root_dir: str = Field(default="wwwroot", description="Root directory for static and uploaded content")
    folder_name: str = Field(default="uploads", description="Upload folder below the root directory")
    max_file_size_mb: int = Field(
        default=MAX_FILE_SIZE_IN_BYTES // BYTES_PER_MB,
        description="Maximum accepted upload size in MB"
    )
    allowed_extensions: List[str] = Field(
        default_factory=lambda: list(ALLOWED_FILE_EXTENSIONS),
        description="Accepted file extensions"
    )

    @field_validator('max_file_size_mb')
    def validate_max_file_size(cls, v):
        if v < 1:
            raise ValueError('Maximum file size must be at least 1 MB')
        return v

    @field_validator('allowed_extensions')
    def validate_allowed_extensions(cls, v):
        normalized = []
        for extension in v:
            extension = extension.strip().lower()
            if not extension:
                continue
            if not extension.startswith('.'):
                extension = f".{extension}"
            normalized.append(extension)
        if not normalized:
            raise ValueError('At least one allowed extension is required')
        return normalized

    @property
    def upload_path(self) -> str:
        """Directory uploaded files are written to."""
        return os.path.join(self.root_dir, self.folder_name)

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * BYTES_PER_MB

    model_config = {
        "env_prefix": "UPLOAD_"
    }


class SecuritySettings(BaseSettings):
    """Security configuration settings."""

    # CORS settings
    allow_origins: List[str] = Field(default=["*"], description="Allowed CORS origins")
    allow_credentials: bool = Field(default=True, description="Allow credentials")
    allow_methods: List[str] = Field(default=["*"], description="Allowed HTTP methods")
    allow_headers: List[str] = Field(default=["*"], description="Allowed headers")

    model_config = {
        "env_prefix": "SECURITY_"
    }


class Settings(BaseSettings):
    """Main application settings."""

    # Application settings
    app_name: str = Field(default=AppConstants.PORTAL_NAME, description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(default=Environment.DEVELOPMENT, description="Application environment")
    debug: bool = Field(default=True, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # Logging settings
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    log_file: bool = Field(default=True, description="Enable file logging")

    # Sub-configurations
    upload: UploadSettings = Field(default_factory=UploadSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    def validate_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('log_level', mode='before')
    def validate_log_level(cls, v):
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return Settings()


# Environment-specific configurations
def get_development_settings() -> Settings:
    """Get development-specific settings."""
    settings = Settings()
    settings.environment = Environment.DEVELOPMENT
    settings.debug = True
    settings.log_level = LogLevel.DEBUG
    return settings


def get_production_settings() -> Settings:
    """Get production-specific settings."""
    settings = Settings()
    settings.environment = Environment.PRODUCTION
    settings.debug = False
    settings.log_level = LogLevel.INFO
    settings.security.allow_origins = []  # Configure specific origins
    return settings


def get_testing_settings() -> Settings:
    """Get testing-specific settings."""
    settings = Settings()
    settings.environment = Environment.TESTING
    settings.debug = True
    settings.log_level = LogLevel.DEBUG
    settings.log_file = False
    return settings


# Configuration factory
def create_settings(environment: Optional[str] = None) -> Settings:
    """Create settings based on environment."""
    env = Environment((environment or os.getenv("ENVIRONMENT", Environment.DEVELOPMENT.value)).lower())

    if env == Environment.DEVELOPMENT:
        return get_development_settings()
    elif env == Environment.PRODUCTION:
        return get_production_settings()
    elif env == Environment.TESTING:
        return get_testing_settings()
    else:
        settings = Settings()
        settings.environment = env
        return settings
