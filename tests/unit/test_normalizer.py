"""
Tests for resume_ats.nlp.normalizer: cleanup, label spacing and duplicate collapse.
"""

import pytest

from resume_ats.nlp.normalizer import TextNormalizer, normalize_text


@pytest.fixture
def normalizer():
    return TextNormalizer(blank_line_collapse=1)


@pytest.fixture
def audit_normalizer():
    return TextNormalizer(blank_line_collapse=2)


# ── Empty input ──────────────────────────────────────────────────────────────


class TestEmptyInput:
    def test_none_returns_empty(self, normalizer):
        assert normalizer.normalize(None) == ""

    def test_empty_returns_empty(self, normalizer):
        assert normalizer.normalize("") == ""

    def test_whitespace_only_returns_empty(self, normalizer):
        assert normalizer.normalize("  \n\n\t ") == ""

    def test_single_character(self, normalizer):
        assert normalizer.normalize("a") == "a"


# ── Artifact repairs ─────────────────────────────────────────────────────────


class TestArtifactRepairs:
    def test_carriage_returns_removed(self, normalizer):
        assert normalizer.normalize("line one\r\nline two") == "line one\nline two"

    def test_bachelorof_split(self, normalizer):
        assert normalizer.normalize("Bachelorof Science") == "Bachelor of Science"

    def test_linkedln_repaired_case_insensitive(self, normalizer):
        assert normalizer.normalize("linkedln: jane") == "LinkedIn: jane"

    def test_phone_label_moved_to_own_line(self, normalizer):
        assert normalizer.normalize("Jane Doe Phone: 9876543210") == "Jane Doe\nPhone: 9876543210"

    def test_email_label_spaced(self, normalizer):
        assert normalizer.normalize("Jane DoeEmail:jane@x.com") == "Jane Doe Email: jane@x.com"

    def test_email_label_at_line_start(self, normalizer):
        assert normalizer.normalize("Email:jane@x.com") == "Email: jane@x.com"

    def test_non_breaking_space_replaced(self, normalizer):
        assert normalizer.normalize("Jane\u00a0Doe") == "Jane Doe"


# ── Blank line collapse ──────────────────────────────────────────────────────


class TestBlankLineCollapse:
    def test_structurer_removes_blank_lines(self, normalizer):
        assert normalizer.normalize("a\n\n\nb") == "a\nb"

    def test_auditor_keeps_one_blank_line(self, audit_normalizer):
        assert audit_normalizer.normalize("a\n\n\n\nb") == "a\n\nb"

    def test_auditor_leaves_single_blank_line(self, audit_normalizer):
        assert audit_normalizer.normalize("a\n\nb") == "a\n\nb"

    def test_surrounding_whitespace_trimmed(self, normalizer):
        assert normalizer.normalize("\n\n  text  \n") == "text"

    def test_zero_collapse_rejected(self):
        with pytest.raises(ValueError):
            TextNormalizer(blank_line_collapse=0)

    def test_zero_duplicate_length_rejected(self):
        with pytest.raises(ValueError):
            TextNormalizer(duplicate_probe_length=0)


# ── Duplicate collapse ───────────────────────────────────────────────────────


class TestDuplicateCollapse:
    def test_doubled_text_is_halved(self, normalizer):
        block = " ".join(f"word{i}" for i in range(60))
        doubled = block + block

        result = normalizer.normalize(doubled)

        assert result == block
        assert len(result) <= len(doubled) / 2 + 1

    def test_doubled_text_with_separator(self, normalizer):
        block = "Experienced engineer. " * 10
        result = normalizer.normalize(block + "\n" + block)
        assert len(result) <= len(block) + 1

    def test_short_text_never_collapsed(self, normalizer):
        assert normalizer.normalize("abcabc") == "abcabc"

    def test_distinct_halves_kept(self, normalizer):
        first = "".join(chr(ord("a") + i % 26) for i in range(150))
        second = "Z" * 150
        assert normalizer.normalize(first + second) == first + second


# ── Idempotence ──────────────────────────────────────────────────────────────


class TestIdempotence:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "Jane Doe Phone: 9876543210 Email:jane@x.com",
            "a\r\n\r\n\r\nb\n\n\nc",
            "Phone:Phone:Phone: 1",
            "Linkedln Bachelorof Masterof",
            ("x" * 120) * 4,
            "Email:\nEmail: x",
        ],
    )
    @pytest.mark.parametrize("collapse", [1, 2])
    def test_normalize_is_fixed_point(self, text, collapse):
        normalizer = TextNormalizer(blank_line_collapse=collapse)
        once = normalizer.normalize(text)
        assert normalizer.normalize(once) == once

    def test_complete_resume_is_fixed_point(self, normalizer, complete_resume_text):
        once = normalizer.normalize(complete_resume_text)
        assert normalizer.normalize(once) == once


# ── normalize_text() ─────────────────────────────────────────────────────────


class TestNormalizeText:
    def test_defaults_to_structurer_collapse(self):
        assert normalize_text("a\n\nb") == "a\nb"

    def test_explicit_collapse(self):
        assert normalize_text("a\n\n\nb", blank_line_collapse=2) == "a\n\nb"
