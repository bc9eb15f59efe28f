"""
Tests for Pydantic data models in resume_ats.data.models.
"""

import json

import pytest
from pydantic import ValidationError

from resume_ats.data.models import (
    AtsAuditResult,
    AuditFinding,
    ContactMetadata,
    ParsedResume,
)
from resume_ats.utils.constants import SectionKey, Severity


def _finding(category="Contact Info", severity=Severity.HIGH, recommendation="Fix it"):
    return AuditFinding(
        category=category,
        severity=severity,
        description="Something is missing",
        recommendation=recommendation,
    )


# ── ContactMetadata ──────────────────────────────────────────────────────────


class TestContactMetadata:
    def test_defaults_are_absent(self):
        metadata = ContactMetadata()
        assert metadata.name is None
        assert metadata.is_empty is True

    def test_not_empty_with_one_field(self):
        assert ContactMetadata(phone="9876543210").is_empty is False

    def test_frozen(self):
        metadata = ContactMetadata(name="Jane Doe")
        with pytest.raises(ValidationError):
            metadata.name = "John"


# ── ParsedResume ─────────────────────────────────────────────────────────────


class TestParsedResume:
    def test_enum_keys_stored_as_strings(self):
        resume = ParsedResume(sections={SectionKey.SKILLS: "Python"})
        assert resume.sections == {"skills": "Python"}

    def test_unknown_section_key_rejected(self):
        with pytest.raises(ValidationError):
            ParsedResume(sections={"hobby": "Chess"})

    def test_negative_word_count_rejected(self):
        with pytest.raises(ValidationError):
            ParsedResume(word_count=-1)

    def test_section_lookup(self):
        resume = ParsedResume(sections={"education": "BS CS"})
        assert resume.section(SectionKey.EDUCATION) == "BS CS"
        assert resume.section("education") == "BS CS"
        assert resume.section(SectionKey.SKILLS) == ""
        assert resume.has_section("education") is True
        assert resume.has_section("skills") is False

    def test_section_lookup_rejects_unknown_key(self):
        with pytest.raises(ValueError):
            ParsedResume().section("hobby")

    def test_json_payload(self):
        resume = ParsedResume(
            raw_text="Jane Doe",
            metadata=ContactMetadata(name="Jane Doe"),
            sections={"contact_info": "Jane Doe"},
            word_count=2,
        )
        payload = json.loads(resume.model_dump_json())
        assert payload["sections"] == {"contact_info": "Jane Doe"}
        assert payload["metadata"]["name"] == "Jane Doe"
        assert payload["word_count"] == 2


class TestWithExperience:
    def test_replaces_experience(self):
        resume = ParsedResume(sections={"experience": "Old role", "skills": "Python"})
        updated = resume.with_experience("  New role\n- Shipped things  ")

        assert updated.section("experience") == "New role\n- Shipped things"
        assert updated.section("skills") == "Python"
        assert resume.section("experience") == "Old role"

    def test_adds_missing_experience(self):
        resume = ParsedResume(sections={"skills": "Python"})
        assert resume.with_experience("New role").section("experience") == "New role"

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_replacement_keeps_original(self, text):
        resume = ParsedResume(sections={"experience": "Old role"})
        assert resume.with_experience(text) is resume


class TestDisplayName:
    def test_metadata_name_first(self):
        resume = ParsedResume(metadata=ContactMetadata(name="Jane Doe"))
        assert resume.display_name == "Jane Doe"

    def test_contact_block_line(self):
        resume = ParsedResume(
            sections={"contact_info": "jane@x.com\n+91 9876543210\nJane Q Doe-Smith"}
        )
        assert resume.display_name == "Jane Q Doe-Smith"

    def test_contact_block_skips_linkedin_line(self):
        resume = ParsedResume(
            sections={"contact_info": "LinkedIn profile link\nJane Doe-Smith Jr"}
        )
        assert resume.display_name == "Jane Doe-Smith Jr"

    def test_derived_from_email(self):
        resume = ParsedResume(metadata=ContactMetadata(email="jane.doe99@x.com"))
        assert resume.display_name == "Jane Doe"

    def test_placeholder(self):
        assert ParsedResume().display_name == "Your Name"


# ── Audit models ─────────────────────────────────────────────────────────────


class TestAuditFinding:
    def test_severity_serialized_by_value(self):
        assert _finding().model_dump()["severity"] == "high"

    def test_invalid_severity_rejected(self):
        with pytest.raises(ValidationError):
            _finding(severity="critical")


class TestAtsAuditResult:
    def test_totals(self):
        result = AtsAuditResult(
            compatibility_score=70,
            issues=[_finding(), _finding()],
            warnings=[_finding(category="Content Length", severity=Severity.MEDIUM)],
        )
        assert result.total_issues == 2
        assert result.total_warnings == 1

    def test_totals_serialized(self):
        payload = AtsAuditResult(compatibility_score=100).model_dump()
        assert payload["total_issues"] == 0
        assert payload["total_warnings"] == 0
        assert payload["recommendations"] == []

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_bounds_enforced(self, score):
        with pytest.raises(ValidationError):
            AtsAuditResult(compatibility_score=score)

    def test_findings_in(self):
        result = AtsAuditResult(
            compatibility_score=80,
            issues=[_finding(category="Missing Section")],
            warnings=[_finding(category="Special Characters", severity=Severity.LOW)],
        )
        assert len(result.findings_in("Special Characters")) == 1
        assert result.findings_in("File Size") == []
