"""
ATS audit rule tables.

Each rule inspects a ScanContext and either reports a finding or stays
silent. Rules are grouped into ordered tables; the scanner evaluates
every table top to bottom, so the order of findings in an audit result
follows the order of these tables.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from resume_ats.data.models import AuditFinding
from resume_ats.nlp.extractors import normalize_format
from resume_ats.nlp.parsers import ContactParser
from resume_ats.utils.config import ATSSettings
from resume_ats.utils.constants import (
    DECORATIVE_SYMBOLS,
    SUPPORTED_RESUME_FORMATS,
    Severity,
)


@dataclass(frozen=True)
class ScanContext:
    """Everything a rule may look at for one audit."""

    file_format: str
    file_size_bytes: Optional[int]
    text: str
    limits: ATSSettings

    @property
    def lower_text(self) -> str:
        return self.text.lower()

    @property
    def word_count(self) -> int:
        return len(self.text.split())


@dataclass(frozen=True)
class AtsRule:
    """
    A single audit check.

    ``detect`` returns the finding description when the rule fires and
    None otherwise.
    """

    name: str
    category: str
    severity: Severity
    recommendation: str
    detect: Callable[[ScanContext], Optional[str]]

    def evaluate(self, context: ScanContext) -> Optional[AuditFinding]:
        description = self.detect(context)
        if description is None:
            return None
        return AuditFinding(
            category=self.category,
            severity=self.severity,
            description=description,
            recommendation=self.recommendation,
        )


def _missing(pattern: str, description: str) -> Callable[[ScanContext], Optional[str]]:
    """Build a detector that fires when no keyword of ``pattern`` occurs."""
    compiled = re.compile(pattern)
    return lambda ctx: None if compiled.search(ctx.lower_text) else description


# ── Format and size (issues) ──

def _unsupported_format(ctx: ScanContext) -> Optional[str]:
    if normalize_format(ctx.file_format) in SUPPORTED_RESUME_FORMATS:
        return None
    return f"Unsupported format: {ctx.file_format or '(none)'}"


def _too_small(ctx: ScanContext) -> Optional[str]:
    # Unknown size means the file could not be inspected; skip the check
    if ctx.file_size_bytes is None:
        return None
    if ctx.file_size_bytes < ctx.limits.min_file_size_bytes:
        return "File appears to be empty or too small"
    return None


FORMAT_RULES: tuple[AtsRule, ...] = (
    AtsRule(
        name="file_format",
        category="File Format",
        severity=Severity.HIGH,
        recommendation="Use PDF or DOCX format",
        detect=_unsupported_format,
    ),
    AtsRule(
        name="file_size",
        category="File Size",
        severity=Severity.HIGH,
        recommendation="Ensure resume has sufficient content",
        detect=_too_small,
    ),
)


# ── Structure and contact details (issues) ──

STRUCTURE_RULES: tuple[AtsRule, ...] = (
    AtsRule(
        name="experience_section",
        category="Missing Section",
        severity=Severity.HIGH,
        recommendation="Add a clearly labeled 'Professional Experience' section",
        detect=_missing(r"experience|work|employment", "No 'Experience' section found"),
    ),
    AtsRule(
        name="education_section",
        category="Missing Section",
        severity=Severity.MEDIUM,
        recommendation="Add a clearly labeled 'Education' section",
        detect=_missing(
            r"education|academic|university|college|degree",
            "No 'Education' section found",
        ),
    ),
    AtsRule(
        name="skills_section",
        category="Missing Section",
        severity=Severity.MEDIUM,
        recommendation="Add a clearly labeled 'Skills' section",
        detect=_missing(r"skills|technologies|programming", "No 'Skills' section found"),
    ),
    AtsRule(
        name="email",
        category="Contact Info",
        severity=Severity.HIGH,
        recommendation="Include your email address in the contact section",
        detect=lambda ctx: None if ContactParser.has_email(ctx.text) else "No email address found",
    ),
    AtsRule(
        name="phone",
        category="Contact Info",
        severity=Severity.MEDIUM,
        recommendation="Include your phone number in the contact section",
        detect=lambda ctx: None if ContactParser.has_phone(ctx.text) else "No phone number found",
    ),
)


# ── Content (warnings) ──

_QUANTIFIED_PATTERN = re.compile(
    r"%|\d+x|\$[\d,]+|increased|reduced|improved|delivered|launched"
)


def _too_short(ctx: ScanContext) -> Optional[str]:
    if ctx.word_count < ctx.limits.min_word_count:
        return f"Resume is short ({ctx.word_count} words)"
    return None


def _too_long(ctx: ScanContext) -> Optional[str]:
    if ctx.word_count > ctx.limits.max_word_count:
        return f"Resume is long ({ctx.word_count} words)"
    return None


def _decorative_symbols(ctx: ScanContext) -> Optional[str]:
    found = [symbol for symbol in DECORATIVE_SYMBOLS if symbol in ctx.text]
    if not found:
        return None
    return f"Special characters found: {' '.join(found)}"


CONTENT_RULES: tuple[AtsRule, ...] = (
    AtsRule(
        name="short_resume",
        category="Content Length",
        severity=Severity.MEDIUM,
        recommendation="Expand with more details about your experience and skills",
        detect=_too_short,
    ),
    AtsRule(
        name="long_resume",
        category="Content Length",
        severity=Severity.LOW,
        recommendation="Consider condensing to 1-2 pages for better ATS parsing",
        detect=_too_long,
    ),
    AtsRule(
        name="quantified_achievements",
        category="Quantified Achievements",
        severity=Severity.MEDIUM,
        recommendation='Add metrics like "Improved performance by 30%" to strengthen ATS scoring',
        detect=lambda ctx: None if _QUANTIFIED_PATTERN.search(ctx.lower_text) else "No quantified achievements found",
    ),
    AtsRule(
        name="special_characters",
        category="Special Characters",
        severity=Severity.LOW,
        recommendation="Replace with standard text equivalents",
        detect=_decorative_symbols,
    ),
)


# ── Score bonuses ──

@dataclass(frozen=True)
class ScoreBonus:
    """Points added to the score when ``applies`` holds."""

    name: str
    points: int
    applies: Callable[[ScanContext], bool]


SCORE_BONUSES: tuple[ScoreBonus, ...] = (
    ScoreBonus("email_signal", 5, lambda ctx: "@" in ctx.text),
    ScoreBonus("linkedin", 3, lambda ctx: "linkedin" in ctx.lower_text),
    ScoreBonus("github", 3, lambda ctx: "github" in ctx.lower_text),
    ScoreBonus(
        "word_count", 5, lambda ctx: ctx.word_count >= ctx.limits.bonus_word_count
    ),
)
