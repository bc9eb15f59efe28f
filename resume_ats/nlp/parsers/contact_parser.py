"""
Contact information parser for resumes.

Extracts the candidate name, email, phone number and LinkedIn profile.
Every field is best-effort and independent of the others.
"""

import re
from typing import Optional

from resume_ats.data.models import ContactMetadata
from resume_ats.utils.logger import get_logger

from .section_parser import SectionParser

logger = get_logger(__name__)


class ContactParser:
    """Parser for extracting contact metadata from resume text."""

    # Email pattern
    EMAIL_PATTERN = re.compile(
        r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"
    )

    # Phone patterns, tried in order
    PHONE_PATTERNS = [
        # Indian mobile, optional +91 prefix
        re.compile(r"(?<!\d)(?:\+91[\-\s]?)?[6-9]\d{9}(?!\d)"),
        # North American style 3-3-4 groups, optional +1 prefix
        re.compile(r"(?<![\d+])(?:\+1[\-.\s]?)?\(?\d{3}\)?[\-.\s]?\d{3}[\-.\s]\d{4}(?!\d)"),
        # International: country code followed by digit groups
        re.compile(r"\+\d{1,3}(?:[\-.\s]?\(?\d{2,4}\)?){2,4}(?!\d)"),
    ]

    # Shortest digit count accepted as a phone number
    MIN_PHONE_DIGITS = 8

    # LinkedIn profile pattern
    LINKEDIN_PATTERN = re.compile(r"linkedin\.com/in/[\w\-]+", re.IGNORECASE)

    # Two to five letter tokens separated by single spaces
    NAME_PATTERN = re.compile(r"[A-Za-z]+(?:\s[A-Za-z.]+){1,4}")
    NAME_MIN_LENGTH = 4
    NAME_MAX_LENGTH = 50

    # Words that are never a name on their own
    NAME_STOPWORDS = {
        "summary", "profile", "objective", "skills", "experience",
        "education", "projects", "certifications", "contact", "phone",
        "email", "linkedin", "resume", "cv",
    }

    def __init__(self, section_parser: Optional[SectionParser] = None):
        """Initialize the parser; section headers are never taken as names."""
        self.section_parser = section_parser or SectionParser()

    def parse(self, text: str) -> ContactMetadata:
        """
        Parse contact information from resume text.

        Args:
            text: Normalized resume text

        Returns:
            ContactMetadata with whatever fields could be found
        """
        if not text:
            return ContactMetadata()

        result = ContactMetadata(
            name=self.extract_name(text),
            email=self.extract_email(text),
            phone=self.extract_phone(text),
            linkedin=self.extract_linkedin(text),
        )

        logger.debug(
            "Contact fields found: "
            f"{[k for k, v in result.model_dump().items() if v]}"
        )
        return result

    def extract_name(self, text: str) -> Optional[str]:
        """
        Extract the candidate name.

        The first line shaped like two to five words that is neither a
        reserved keyword nor a section header is taken as the name.
        """
        for line in text.split("\n"):
            candidate = line.strip()

            if not self.NAME_MIN_LENGTH <= len(candidate) <= self.NAME_MAX_LENGTH:
                continue
            if not self.NAME_PATTERN.fullmatch(candidate):
                continue
            if candidate.lower() in self.NAME_STOPWORDS:
                continue
            if self.section_parser.match_header(candidate) is not None:
                continue

            return candidate

        return None

    @classmethod
    def extract_email(cls, text: str) -> Optional[str]:
        """Extract the first email address from text."""
        match = cls.EMAIL_PATTERN.search(text)
        return match.group(0) if match else None

    @classmethod
    def extract_phone(cls, text: str) -> Optional[str]:
        """Extract the first phone number, trying patterns in priority order."""
        for pattern in cls.PHONE_PATTERNS:
            for match in pattern.finditer(text):
                phone = match.group(0).strip()
                if len(re.sub(r"\D", "", phone)) >= cls.MIN_PHONE_DIGITS:
                    return phone
        return None

    @classmethod
    def extract_linkedin(cls, text: str) -> Optional[str]:
        """Extract a LinkedIn profile path (lowercased, without scheme)."""
        match = cls.LINKEDIN_PATTERN.search(text)
        return match.group(0).lower() if match else None

    @classmethod
    def has_email(cls, text: str) -> bool:
        return cls.extract_email(text) is not None

    @classmethod
    def has_phone(cls, text: str) -> bool:
        return cls.extract_phone(text) is not None
