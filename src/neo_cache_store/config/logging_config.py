"""Centralized logging configuration for neo-cache-store.

Provides consistent, configurable logging with environment-based control
over verbosity and log levels. Applications call setup_logging() once at
startup; importing the library never reconfigures logging.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional

from .cache_store_config import CacheStoreConfig


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Store client libraries that should only log errors
    ERROR_ONLY_MODULES = [
        "redis",
        "asyncio",
    ]
    
    @classmethod
    def build_config(cls, enable_cache_logging: Optional[bool] = None) -> Dict[str, Any]:
        """Build a dictConfig mapping from environment variables.
        
        LOG_LEVEL wins when set explicitly; otherwise LOG_VERBOSITY decides.
        
        Args:
            enable_cache_logging: Route per-operation cache records (DEBUG)
                to the console; ENABLE_CACHE_LOGGING decides when None
        """
        log_level = os.getenv("LOG_LEVEL")
        log_verbosity = os.getenv("LOG_VERBOSITY", "NORMAL").upper()
        log_format = os.getenv("LOG_FORMAT", "simple").lower()
        if enable_cache_logging is None:
            enable_cache_logging = os.getenv("ENABLE_CACHE_LOGGING", "false").lower() == "true"
        
        if log_level and log_level.upper() in LogLevel.__members__:
            effective_log_level = log_level.upper()
        else:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)
        
        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]
        
        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {}
        }
        
        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }
        
        # Per-operation cache records are DEBUG; without this they follow the root level
        if enable_cache_logging:
            logging_config["handlers"]["cache_operations"] = {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
            logging_config["loggers"]["neo_cache_store.application"] = {
                "level": "DEBUG",
                "handlers": ["cache_operations"],
                "propagate": False,
            }
        
        return logging_config
    
    @classmethod
    def configure(cls, enable_cache_logging: Optional[bool] = None) -> None:
        """Configure logging based on environment variables."""
        logging_config = cls.build_config(enable_cache_logging)
        logging.config.dictConfig(logging_config)
        
        logger = logging.getLogger(__name__)
        logger.debug("Logging configured: level=%s", logging_config["root"]["level"])
    
    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name."""
        return logging.getLogger(name)


def setup_logging(cache_config: Optional[CacheStoreConfig] = None) -> None:
    """Setup logging configuration from environment variables.
    
    This is the main entry point for configuring logging in the application.
    It should be called once at application startup.
    
    Args:
        cache_config: When its log_cache_operations is set, per-operation
            cache records are shown regardless of ENABLE_CACHE_LOGGING
    """
    enable_cache_logging = True if cache_config and cache_config.log_cache_operations else None
    LoggingConfig.configure(enable_cache_logging)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.
    
    Args:
        name: Module name (usually __name__)
        
    Returns:
        Configured logger instance
    """
    return LoggingConfig.get_logger(name)
