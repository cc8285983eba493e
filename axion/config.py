"""
Configuration management for the Axion API client.

Environment-based configuration using python-dotenv for secure credential handling.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


# Fixed API host; not overridable from the environment
BASE_URL: str = "https://api.axionquant.com"


def _optional_float(name: str, default: Optional[str] = None) -> Optional[float]:
    raw = os.getenv(name, default)
    if raw is None or not raw.strip():
        return None
    return float(raw)


class AxionConfig:
    """Axion API credentials and transport settings."""

    # Bearer token sent as the Authorization header
    API_KEY: Optional[str] = os.getenv("AXION_API_KEY") or None

    # Total request timeout in seconds (empty value disables the timeout)
    REQUEST_TIMEOUT: Optional[float] = _optional_float("AXION_REQUEST_TIMEOUT", "30")

    # User-Agent header value
    USER_AGENT: str = os.getenv("AXION_USER_AGENT", "axion-python-client/0.1.0")

    @classmethod
    def is_configured(cls) -> bool:
        """Check if an API key is configured."""
        return bool(cls.API_KEY)


class LoggingConfig:
    """Logging configuration."""

    # Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Log directory
    LOG_DIR: Path = Path(os.getenv("LOG_DIR", "logs"))

    # Log file name
    LOG_FILE: str = os.getenv("LOG_FILE", "axion_client.log")

    # Log format
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Date format
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # Maximum log file size in bytes (10MB default)
    MAX_LOG_SIZE: int = int(os.getenv("MAX_LOG_SIZE", str(10 * 1024 * 1024)))

    # Number of backup log files to keep
    BACKUP_COUNT: int = int(os.getenv("BACKUP_COUNT", "5"))

    @classmethod
    def ensure_log_directory(cls) -> None:
        """Create log directory if it doesn't exist."""
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_log_file_path(cls) -> Path:
        """Get full path to log file."""
        return cls.LOG_DIR / cls.LOG_FILE


class AppConfig:
    """Main application configuration aggregating all config classes."""

    axion = AxionConfig
    logging = LoggingConfig

    # Application metadata
    APP_NAME: str = "Axion API Client"
    VERSION: str = "0.1.0"

    @classmethod
    def validate(cls) -> tuple[bool, list[str]]:
        """
        Validate configuration settings.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = []

        if not AxionConfig.is_configured():
            errors.append("AXION_API_KEY is not configured")

        if AxionConfig.REQUEST_TIMEOUT is not None and AxionConfig.REQUEST_TIMEOUT <= 0:
            errors.append("AXION_REQUEST_TIMEOUT must be greater than 0")

        if LoggingConfig.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"LOG_LEVEL '{LoggingConfig.LOG_LEVEL}' is not a valid level")

        return (len(errors) == 0, errors)
