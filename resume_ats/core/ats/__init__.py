"""ATS compatibility audit module."""

from .ats_scanner import (
    ATSScanner,
    audit_resume,
    get_ats_scanner,
)
from .rules import (
    CONTENT_RULES,
    FORMAT_RULES,
    SCORE_BONUSES,
    STRUCTURE_RULES,
    AtsRule,
    ScanContext,
    ScoreBonus,
)

__all__ = [
    "ATSScanner",
    "audit_resume",
    "get_ats_scanner",
    "CONTENT_RULES",
    "FORMAT_RULES",
    "SCORE_BONUSES",
    "STRUCTURE_RULES",
    "AtsRule",
    "ScanContext",
    "ScoreBonus",
]
