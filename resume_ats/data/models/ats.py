"""
ATS audit data models.

Audit results are computed fresh per request and serialized directly
into JSON responses; they are never persisted by this package.
"""

from pydantic import Field, computed_field

from resume_ats.utils.constants import (
    MAX_COMPATIBILITY_SCORE,
    MIN_COMPATIBILITY_SCORE,
    Severity,
)

from .base import EmbeddedModel


class AuditFinding(EmbeddedModel):
    """A single issue or warning raised by the auditor."""

    category: str  # e.g. "Missing Section", "Contact Info"
    severity: Severity
    description: str
    recommendation: str


class AtsAuditResult(EmbeddedModel):
    """Outcome of an ATS compatibility audit."""

    compatibility_score: int = Field(
        ge=MIN_COMPATIBILITY_SCORE, le=MAX_COMPATIBILITY_SCORE
    )
    issues: list[AuditFinding] = Field(default_factory=list)
    warnings: list[AuditFinding] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def total_issues(self) -> int:
        return len(self.issues)

    @computed_field
    @property
    def total_warnings(self) -> int:
        return len(self.warnings)

    def findings_in(self, category: str) -> list[AuditFinding]:
        """Get all issues and warnings of a category."""
        return [f for f in (*self.issues, *self.warnings) if f.category == category]
