"""
Utility modules for the resume ATS toolkit.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from resume_ats.utils.config import (
    AppSettings,
    ATSSettings,
    LoggingSettings,
    ParserSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    PACKAGE_DIR,
    LOGS_DIR,
)
from resume_ats.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    SUPPORTED_RESUME_FORMATS,
    SectionKey,
    Severity,
)
from resume_ats.utils.logger import (
    setup_logging,
    get_logger,
)

__all__ = [
    # Config
    "AppSettings",
    "ATSSettings",
    "LoggingSettings",
    "ParserSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "PACKAGE_DIR",
    "LOGS_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "SUPPORTED_RESUME_FORMATS",
    "SectionKey",
    "Severity",
    # Logger
    "setup_logging",
    "get_logger",
]
