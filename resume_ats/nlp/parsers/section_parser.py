"""
Section partitioning for resume text.

Splits normalized resume text into labeled sections using an ordered
catalog of header patterns. The first pattern that matches a short line
wins and the line is consumed as a header.
"""

import re
from dataclasses import dataclass
from typing import Optional

from resume_ats.utils.config import get_settings
from resume_ats.utils.constants import SectionKey
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class HeaderPattern:
    """A header rule: lines matching ``pattern`` open section ``key``."""

    key: SectionKey
    pattern: re.Pattern

    def matches(self, cleaned_line: str) -> bool:
        return self.pattern.fullmatch(cleaned_line) is not None


def _header(key: SectionKey, pattern: str) -> HeaderPattern:
    return HeaderPattern(key, re.compile(pattern, re.IGNORECASE))


# Evaluated top to bottom; order decides lines that match several rules
SECTION_HEADER_CATALOG: tuple[HeaderPattern, ...] = (
    _header(
        SectionKey.EXPERIENCE,
        r"(?:professional\s+)?(?:work\s+)?(?:experience|employment|history)",
    ),
    _header(
        SectionKey.EDUCATION,
        r"education|educational\s+background|academic\s+background|qualifications?|degrees?",
    ),
    _header(
        SectionKey.SKILLS,
        r"(?:technical\s+)?skills(?:\s*&\s*tools)?",
    ),
    _header(
        SectionKey.PROJECTS,
        r"(?:key\s+|personal\s+|academic\s+)?projects",
    ),
    _header(
        SectionKey.CERTIFICATIONS,
        r"certifications?(?:\s*&\s*awards?)?|certificates?|awards?|achievements?|licenses?",
    ),
    _header(
        SectionKey.SUMMARY,
        r"(?:professional\s+)?(?:summary|profile|objective|about\s+me)",
    ),
    _header(SectionKey.LANGUAGES, r"languages?"),
    _header(SectionKey.INTERESTS, r"interests?|hobbies"),
)

# Leading bullets, numbering and punctuation in front of a header
_LEADING_NOISE = re.compile(r"^[\W\d_]+")
_SEPARATORS = re.compile(r"[:|]")


def clean_header_candidate(line: str) -> str:
    """Lowercase a line and strip the decoration around a potential header."""
    cleaned = _LEADING_NOISE.sub("", line.strip().lower())
    cleaned = _SEPARATORS.sub("", cleaned)
    return cleaned.strip()


class SectionParser:
    """
    Partitioner that assigns every non-blank line to one section bucket.

    Text before the first recognized header goes to ``contact_info``.
    Instances hold only configuration and are safe to share between threads.
    """

    def __init__(
        self,
        catalog: tuple[HeaderPattern, ...] = SECTION_HEADER_CATALOG,
        short_line_threshold: Optional[int] = None,
        dedup_prefix_length: Optional[int] = None,
    ):
        """
        Initialize the section parser.

        Args:
            catalog: Ordered header rules (first match wins)
            short_line_threshold: Lines at least this long are never headers
            dedup_prefix_length: Leading characters of a block that, if already
                present in its section, cause the block to be skipped
        """
        parser_settings = get_settings().parser
        if short_line_threshold is None:
            short_line_threshold = parser_settings.short_line_threshold
        if dedup_prefix_length is None:
            dedup_prefix_length = parser_settings.section_dedup_prefix_length
        if short_line_threshold < 1 or dedup_prefix_length < 1:
            raise ValueError("short_line_threshold and dedup_prefix_length must be positive")

        self.catalog = catalog
        self.short_line_threshold = short_line_threshold
        self.dedup_prefix_length = dedup_prefix_length

    def match_header(self, line: str) -> Optional[SectionKey]:
        """
        Identify if a line is a section header.

        Returns the section key of the first matching rule, or None.
        """
        stripped = line.strip()
        if not stripped or len(stripped) >= self.short_line_threshold:
            return None

        cleaned = clean_header_candidate(stripped)
        if not cleaned:
            return None

        for header in self.catalog:
            if header.matches(cleaned):
                return header.key
        return None

    def partition(self, text: str) -> dict[SectionKey, str]:
        """
        Split text into sections.

        Args:
            text: Normalized resume text

        Returns:
            Ordered mapping of section key to its accumulated text; sections
            that received no content are absent
        """
        sections: dict[SectionKey, str] = {}
        current = SectionKey.CONTACT_INFO
        buffer: list[str] = []

        for line in text.split("\n"):
            stripped = line.strip()
            if not stripped:
                continue

            matched = self.match_header(stripped)
            if matched is not None:
                self._flush(sections, current, buffer)
                buffer = []
                current = matched
            else:
                buffer.append(stripped)

        self._flush(sections, current, buffer)

        logger.debug(f"Detected sections: {[key.value for key in sections]}")
        return sections

    def _flush(self, sections: dict[SectionKey, str], key: SectionKey, buffer: list[str]) -> None:
        """Append a buffered block to its section unless its opening is already there."""
        if not buffer:
            return

        content = "\n".join(buffer).strip()
        existing = sections.get(key)

        if existing is None:
            sections[key] = content
        elif content[: self.dedup_prefix_length] not in existing:
            sections[key] = existing + "\n" + content
        else:
            logger.debug(f"Skipped repeated block in section '{key.value}'")
