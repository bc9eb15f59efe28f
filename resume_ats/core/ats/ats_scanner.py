"""
ATS compatibility scanner.

Audits resume text the way a typical applicant tracking system would
read it: checks the file, the presence of standard sections and contact
details, and content quality signals, then condenses the findings into
a 0-100 compatibility score with prioritized recommendations.
"""

from pathlib import Path
from typing import Optional

from resume_ats.data.models import AtsAuditResult, AuditFinding
from resume_ats.nlp.normalizer import TextNormalizer
from resume_ats.utils.config import ATSSettings, get_settings
from resume_ats.utils.constants import (
    BASE_COMPATIBILITY_SCORE,
    ISSUE_PENALTIES,
    MAX_COMPATIBILITY_SCORE,
    MIN_COMPATIBILITY_SCORE,
    WARNING_PENALTIES,
    Severity,
)
from resume_ats.utils.logger import get_logger

from .rules import (
    CONTENT_RULES,
    FORMAT_RULES,
    SCORE_BONUSES,
    STRUCTURE_RULES,
    AtsRule,
    ScanContext,
)

logger = get_logger(__name__)


class ATSScanner:
    """
    Scanner that audits resumes for ATS compatibility.

    Scoring:
    - Start from 100
    - Subtract a severity-based penalty per issue and per warning
    - Add bonuses for contact and profile signals and sufficient length
    - Clamp to [0, 100]

    The scanner never raises for any text input.
    """

    def __init__(self, settings: Optional[ATSSettings] = None):
        """
        Initialize the scanner.

        Args:
            settings: Optional audit thresholds (defaults to application settings)
        """
        self.settings = settings or get_settings().ats
        self.normalizer = TextNormalizer(
            blank_line_collapse=self.settings.blank_line_collapse
        )

    def scan(
        self,
        file_format: str,
        file_size_bytes: Optional[int],
        resume_text: Optional[str],
    ) -> AtsAuditResult:
        """
        Audit resume text for ATS compatibility.

        Args:
            file_format: Declared file format or extension
            file_size_bytes: Size of the uploaded file; None skips the size check
            resume_text: Extracted resume text

        Returns:
            AtsAuditResult with score, issues, warnings and recommendations
        """
        context = ScanContext(
            file_format=file_format,
            file_size_bytes=file_size_bytes,
            text=self.normalizer.normalize(resume_text),
            limits=self.settings,
        )

        issues = self._run_rules(FORMAT_RULES + STRUCTURE_RULES, context)
        warnings = self._run_rules(CONTENT_RULES, context)

        result = AtsAuditResult(
            compatibility_score=self._calculate_score(issues, warnings, context),
            issues=issues,
            warnings=warnings,
            recommendations=self._build_recommendations(issues, warnings),
        )

        logger.debug(
            f"ATS scan ({file_format}): score={result.compatibility_score}, "
            f"issues={result.total_issues}, warnings={result.total_warnings}"
        )
        return result

    def scan_file(self, file_path: str | Path, resume_text: Optional[str]) -> AtsAuditResult:
        """
        Audit text extracted from a file on disk.

        The format comes from the file suffix. If the file can no longer be
        inspected, the size check is skipped.
        """
        path = Path(file_path)
        try:
            file_size: Optional[int] = path.stat().st_size
        except OSError as e:
            logger.debug(f"Size check skipped for {path.name}: {e.strerror}")
            file_size = None

        return self.scan(path.suffix, file_size, resume_text)

    def _run_rules(self, rules: tuple[AtsRule, ...], context: ScanContext) -> list[AuditFinding]:
        """Evaluate rules in order and collect the findings they report."""
        findings = []
        for rule in rules:
            finding = rule.evaluate(context)
            if finding is not None:
                findings.append(finding)
        return findings

    def _calculate_score(
        self,
        issues: list[AuditFinding],
        warnings: list[AuditFinding],
        context: ScanContext,
    ) -> int:
        """Calculate the clamped compatibility score."""
        score = BASE_COMPATIBILITY_SCORE

        for issue in issues:
            score -= ISSUE_PENALTIES[Severity(issue.severity)]
        for warning in warnings:
            score -= WARNING_PENALTIES[Severity(warning.severity)]

        for bonus in SCORE_BONUSES:
            if bonus.applies(context):
                score += bonus.points

        return max(MIN_COMPATIBILITY_SCORE, min(MAX_COMPATIBILITY_SCORE, score))

    def _build_recommendations(
        self, issues: list[AuditFinding], warnings: list[AuditFinding]
    ) -> list[str]:
        """High-severity fixes first, then medium, then the leading warnings."""
        recommendations = [
            i.recommendation for i in issues if Severity(i.severity) == Severity.HIGH
        ]
        recommendations.extend(
            i.recommendation for i in issues if Severity(i.severity) == Severity.MEDIUM
        )
        recommendations.extend(
            w.recommendation
            for w in warnings[: self.settings.max_warning_recommendations]
        )
        return recommendations


# Singleton instance
_ats_scanner: Optional[ATSScanner] = None


def get_ats_scanner() -> ATSScanner:
    """Get the ATS scanner singleton instance."""
    global _ats_scanner
    if _ats_scanner is None:
        _ats_scanner = ATSScanner()
    return _ats_scanner


def audit_resume(
    file_format: str, file_size_bytes: Optional[int], resume_text: Optional[str]
) -> AtsAuditResult:
    """Audit resume text with the shared scanner."""
    return get_ats_scanner().scan(file_format, file_size_bytes, resume_text)
