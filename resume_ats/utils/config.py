"""
Configuration management for the resume ATS toolkit.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
PACKAGE_DIR = Path(__file__).parent.parent
ROOT_DIR = PACKAGE_DIR.parent
LOGS_DIR = ROOT_DIR / "logs"


class ParserSettings(BaseSettings):
    """Resume structuring configuration."""

    model_config = SettingsConfigDict(env_prefix="PARSER_")

    # Lines this long or longer are never treated as section headers
    short_line_threshold: int = 60

    # Leading characters of the first half searched for in the second half
    duplicate_probe_length: int = 100

    # Leading characters of a block checked before appending to a section
    section_dedup_prefix_length: int = 50

    # Maximum consecutive newlines kept by the structurer's normalization
    blank_line_collapse: int = 1

    @field_validator("short_line_threshold", "duplicate_probe_length", "section_dedup_prefix_length", "blank_line_collapse")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject zero or negative tunables."""
        if v < 1:
            raise ValueError("value must be a positive integer")
        return v


class ATSSettings(BaseSettings):
    """ATS compatibility audit configuration."""

    model_config = SettingsConfigDict(env_prefix="ATS_")

    min_file_size_bytes: int = 500
    min_word_count: int = 150
    max_word_count: int = 1200
    bonus_word_count: int = 200
    max_warning_recommendations: int = 3

    # The auditor keeps one blank line between paragraphs
    blank_line_collapse: int = 2

    @field_validator("min_word_count", "max_word_count", "bonus_word_count", "blank_line_collapse")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Reject zero or negative thresholds."""
        if v < 1:
            raise ValueError("value must be a positive integer")
        return v

    @field_validator("min_file_size_bytes", "max_warning_recommendations")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("value must not be negative")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_output: bool = False
    file_path: Path = LOGS_DIR / "resume_ats.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "resume-ats"
    version: str = "0.1.0"
    description: str = "Resume structuring and ATS compatibility auditing"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    parser: ParserSettings = Field(default_factory=ParserSettings)
    ats: ATSSettings = Field(default_factory=ATSSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
