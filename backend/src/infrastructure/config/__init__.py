"""Configuration module for application settings."""

from .settings import Settings, get_settings
from .logger import APP_LOGGER_NAME, setup_logger, get_logger

__all__ = ["Settings", "get_settings", "APP_LOGGER_NAME", "setup_logger", "get_logger"]
