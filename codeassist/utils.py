"""
Utility functions for the code assistant.

This module provides:
- Environment variable validation and loading
- Logging configuration with structured JSON output
- Timing utilities for performance measurement
- Input redaction for safe logging
"""

import os
import re
import sys
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from .models import Settings


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def setup_logging(level: str = "INFO") -> None:
    """
    Configure structured JSON logging with Loguru.
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stdout,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}",
        level=level,
        serialize=True
    )

    logger.info("Logging configuration complete")


def load_and_validate_env() -> Settings:
    """
    Load and validate the environment into a Settings object.

    Returns:
        Settings: Validated configuration

    Raises:
        ConfigurationError: If GROQ_API_KEY is missing or a value is out of range
    """
    load_dotenv()

    api_key = os.getenv("GROQ_API_KEY")
    if not api_key:
        raise ConfigurationError("Missing Groq API key. Set GROQ_API_KEY in your environment.")

    defaults = Settings.model_fields
    values = {
        "groq_api_key": api_key,
        "model": os.getenv("GROQ_MODEL") or defaults["model"].default,
        "base_url": os.getenv("GROQ_BASE_URL") or defaults["base_url"].default,
    }

    # Numeric variables fall back to their defaults when unparsable
    numeric_vars = {
        "GROQ_TEMPERATURE": "temperature",
        "REQUEST_TIMEOUT_SECONDS": "request_timeout_seconds",
    }
    for var, field in numeric_vars.items():
        default = defaults[field].default
        value = os.getenv(var)
        if not value:
            values[field] = default
            continue
        try:
            values[field] = float(value)
        except ValueError:
            logger.warning(f"Invalid value for {var}: {value}, using default: {default}")
            values[field] = default

    try:
        settings = Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    logger.info("Environment configuration loaded and validated", model=settings.model)
    return settings


def sanitize_for_logging(text: Optional[str], max_length: int = 200) -> str:
    """
    Mask secrets and truncate user input before it reaches the logs.

    Args:
        text: Input text to sanitize
        max_length: Maximum length of sanitized text

    Returns:
        str: Sanitized text safe for logging
    """
    if not text:
        return ""

    sensitive_patterns = [
        r'gsk_[a-zA-Z0-9]+',  # Groq API keys
        r'sk-[a-zA-Z0-9]+',
        r'Bearer\s+[a-zA-Z0-9_\-\.]+',
    ]

    sanitized = text
    for pattern in sensitive_patterns:
        sanitized = re.sub(pattern, '[REDACTED]', sanitized, flags=re.IGNORECASE)

    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length] + "..."

    return sanitized


class Timer:
    """Context manager for timing operations."""

    def __init__(self, operation_name: str = "operation"):
        self.operation_name = operation_name
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = datetime.now(timezone.utc)
        logger.debug(f"Starting {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = datetime.now(timezone.utc)

        if exc_type is None:
            logger.info(f"Completed {self.operation_name}", duration_ms=self.duration_ms)
        else:
            logger.error(f"Failed {self.operation_name}", duration_ms=self.duration_ms, error=str(exc_val))

    @property
    def duration_ms(self) -> float:
        """Get duration in milliseconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds() * 1000
        return 0.0


def get_current_timestamp() -> str:
    """Current timestamp in ISO format with UTC timezone."""
    return datetime.now(timezone.utc).isoformat()


# Global configuration instance
_config: Optional[Settings] = None


def get_config() -> Settings:
    """
    Get the global configuration, loading it if not already loaded.

    Returns:
        Settings: Configuration object
    """
    global _config
    if _config is None:
        _config = load_and_validate_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None


def initialize_app() -> Settings:
    """
    Initialize logging and configuration.
    Call this at app startup.
    """
    setup_logging()
    config = get_config()

    logger.info(
        "Application initialization complete",
        model=config.model,
        base_url=config.base_url,
        temperature=config.temperature
    )
    return config
