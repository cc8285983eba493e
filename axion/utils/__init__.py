"""
Utils Module

Shared utilities, helpers, and common functionality.

Components:
    - logger: Logging with daily rotation and colorized output
    - exceptions: Custom exception classes
"""

from axion.utils.logger import (
    LoggerConfig,
    get_api_logger,
    get_logger,
    setup_logger,
)

__all__ = [
    # Logger utilities
    "LoggerConfig",
    "setup_logger",
    "get_logger",
    "get_api_logger",
]
