"""
Logging configuration for the Unit Master service.
Provides console and rotating file logging for requests and helper operations.
"""
import logging
import logging.config
import os
import sys
from pathlib import Path
from datetime import datetime
from typing import Dict, Any


def get_log_directory() -> str:
    """Get the logs directory path."""
    # Use the project root's logs directory
    project_root = Path(__file__).parent.parent.parent
    log_dir = project_root / "logs"
    log_dir.mkdir(exist_ok=True)
    return str(log_dir)


def get_logging_config(log_file: bool = True) -> Dict[str, Any]:
    """Get logging configuration dictionary."""
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
            "simple": {
                "format": "%(asctime)s | %(levelname)-8s | %(message)s",
                "datefmt": "%H:%M:%S"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "INFO",
                "formatter": "simple",
                "stream": sys.stdout
            }
        },
        "loggers": {
            "": {  # Root logger
                "level": "INFO",
                "handlers": ["console"]
            },
            "api": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False
            },
            "helpers": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False
            },
            "app": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False
            },
            "uvicorn": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False
            }
        }
    }

    if not log_file:
        return config

    log_dir = get_log_directory()
    timestamp = datetime.now().strftime("%Y%m%d")

    def rotating(level: str, prefix: str, backup_count: int = 5) -> Dict[str, Any]:
        return {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filename": os.path.join(log_dir, f"{prefix}_{timestamp}.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": backup_count,
            "encoding": "utf8"
        }

    config["handlers"].update({
        "file_all": rotating("DEBUG", "app"),
        "file_api": rotating("INFO", "api"),
        "file_error": rotating("ERROR", "error", backup_count=10)
    })

    loggers = config["loggers"]
    loggers[""]["handlers"] += ["file_all", "file_error"]
    loggers["api"]["handlers"] += ["file_api", "file_error"]
    loggers["helpers"]["handlers"] += ["file_all", "file_error"]
    loggers["app"]["handlers"] += ["file_all", "file_error"]
    loggers["uvicorn"]["handlers"] += ["file_api"]
    loggers["uvicorn.access"] = {
        "level": "INFO",
        "handlers": ["file_api"],
        "propagate": False
    }
    return config


def setup_logging(log_level: str = "INFO", log_file: bool = True) -> None:
    """Setup logging configuration for the application."""
    config = get_logging_config(log_file)

    # Adjust log level if specified
    if log_level.upper() in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        config["loggers"][""]["level"] = log_level.upper()
        config["loggers"]["helpers"]["level"] = log_level.upper()

    # Apply configuration
    logging.config.dictConfig(config)

    logger = logging.getLogger("app")
    logger.info("=" * 60)
    logger.info("Unit Master - Logging Initialized")
    logger.info(f"Log Level: {log_level.upper()}")
    if log_file:
        logger.info(f"Log Directory: {get_log_directory()}")
    logger.info("=" * 60)


def get_api_logger() -> logging.Logger:
    """Get logger specifically for API operations."""
    return logging.getLogger("api")


def get_helper_logger() -> logging.Logger:
    """Get logger for file and cryptography helpers."""
    return logging.getLogger("helpers")


def get_app_logger() -> logging.Logger:
    """Get logger for application bootstrap."""
    return logging.getLogger("app")


# Export convenience functions
__all__ = [
    "setup_logging",
    "get_api_logger",
    "get_helper_logger",
    "get_app_logger"
]
