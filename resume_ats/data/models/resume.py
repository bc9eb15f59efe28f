"""
Resume data models.

Defines the structured representation produced by the resume structurer:
contact metadata, the section map and the parsed resume itself.
"""

import re
from typing import Any, Optional

from pydantic import Field, field_validator

from resume_ats.utils.constants import SectionKey

from .base import FrozenModel


class ContactMetadata(FrozenModel):
    """Contact details found by pattern matching; each field is best-effort."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if no contact field was found."""
        return not any((self.name, self.email, self.phone, self.linkedin))


class ParsedResume(FrozenModel):
    """
    Structured resume produced once per uploaded document.

    Consumed by scoring, auditing, rewriting and PDF regeneration.
    ``sections`` maps a section key (see ``SectionKey``) to the text
    assigned to it, in the order sections were first encountered.
    """

    raw_text: str = ""
    metadata: ContactMetadata = Field(default_factory=ContactMetadata)
    sections: dict[str, str] = Field(default_factory=dict)
    word_count: int = Field(default=0, ge=0)

    @field_validator("sections", mode="before")
    @classmethod
    def validate_section_keys(cls, v: Any) -> Any:
        """Restrict keys to the section vocabulary and store them as plain strings."""
        if not isinstance(v, dict):
            return v
        return {SectionKey(key).value: content for key, content in v.items()}

    def section(self, key: SectionKey | str) -> str:
        """Get the text of a section, or an empty string if absent."""
        return self.sections.get(SectionKey(key).value, "")

    def has_section(self, key: SectionKey | str) -> bool:
        """Check if a section received any content."""
        return bool(self.section(key))

    def with_experience(self, experience_text: Optional[str]) -> "ParsedResume":
        """
        Return a copy whose experience block is replaced.

        Used to substitute an externally rewritten experience section before
        regenerating the PDF. Empty replacement text keeps the original.
        """
        if not experience_text or not experience_text.strip():
            return self

        sections = dict(self.sections)
        sections[SectionKey.EXPERIENCE.value] = experience_text.strip()
        return self.model_copy(update={"sections": sections})

    @property
    def display_name(self) -> str:
        """
        Name to print in a regenerated resume header.

        Priority: extracted name, first name-like line of the contact block,
        a name derived from the email local part, then a placeholder.
        """
        if self.metadata.name:
            return self.metadata.name.strip()

        for line in self.section(SectionKey.CONTACT_INFO).split("\n"):
            candidate = line.strip()
            if (
                candidate
                and len(candidate) < 60
                and len(candidate.split(" ")) >= 2
                and not re.search(r"\d", candidate)
                and "@" not in candidate
                and "linkedin" not in candidate.lower()
            ):
                return candidate

        if self.metadata.email:
            local_part = self.metadata.email.split("@")[0]
            words = re.sub(r"[._0-9]", " ", local_part).split()
            derived = " ".join(word[:1].upper() + word[1:] for word in words)
            if derived:
                return derived

        return "Your Name"
