"""
Configuration module for the Unit Master service.

This module provides centralized configuration management with:
- Environment-specific settings
- Type-safe configuration
- Logging setup
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    UploadSettings,
    SecuritySettings,
    get_settings,
    create_settings,
    get_development_settings,
    get_production_settings,
    get_testing_settings
)

from .logging_config import (
    setup_logging,
    get_api_logger,
    get_helper_logger,
    get_app_logger
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "UploadSettings",
    "SecuritySettings",
    "get_settings",
    "create_settings",
    "get_development_settings",
    "get_production_settings",
    "get_testing_settings",
    "setup_logging",
    "get_api_logger",
    "get_helper_logger",
    "get_app_logger"
]
