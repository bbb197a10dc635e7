"""
Config Package - application settings and logging setup.

Session identity lives in config.auth and is imported from there directly.
"""

from config.settings import Settings, get_settings
from config.logging_config import setup_logging

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "setup_logging",
]
