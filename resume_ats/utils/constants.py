"""
Application-wide constants for the resume ATS toolkit.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "resume-ats"
APP_DISPLAY_NAME: Final[str] = "Resume ATS Optimizer"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# File Types
# =============================================================================

# Declared formats accepted by the extractors and the audit format check
SUPPORTED_RESUME_FORMATS: Final[tuple[str, ...]] = (
    "pdf",
    "docx",
    "doc",
    "txt",
)


# =============================================================================
# Enums
# =============================================================================


class SectionKey(str, Enum):
    """Closed vocabulary of resume section buckets."""

    CONTACT_INFO = "contact_info"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    LANGUAGES = "languages"
    INTERESTS = "interests"


class Severity(str, Enum):
    """Severity of an audit finding."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# Scoring Constants
# =============================================================================

BASE_COMPATIBILITY_SCORE: Final[int] = 100
MIN_COMPATIBILITY_SCORE: Final[int] = 0
MAX_COMPATIBILITY_SCORE: Final[int] = 100

# Points deducted per issue (format, size, structure, contact)
ISSUE_PENALTIES: Final[dict[Severity, int]] = {
    Severity.HIGH: 15,
    Severity.MEDIUM: 8,
    Severity.LOW: 3,
}

# Points deducted per content warning
WARNING_PENALTIES: Final[dict[Severity, int]] = {
    Severity.HIGH: 5,
    Severity.MEDIUM: 5,
    Severity.LOW: 2,
}

# Characters that ATS parsers commonly mangle
DECORATIVE_SYMBOLS: Final[tuple[str, ...]] = ("©", "®", "™", "★", "→", "←")
