"""
Text normalization for extracted resume text.

Shared by the resume structurer and the ATS auditor. Repairs known
extraction artifacts, anchors contact labels on their own line or word
boundary, collapses blank-line runs and drops a duplicated second half
left behind by some PDF engines.
"""

import re
from typing import Optional

from resume_ats.utils.config import get_settings
from resume_ats.utils.logger import get_logger

logger = get_logger(__name__)


# Invisible characters some decoders leave in the text
INVISIBLE_CHARACTERS: dict[str, str] = {
    "\r": "",
    "\ufeff": "",  # BOM
    "\u200b": "",  # Zero-width space
    "\u00ad": "",  # Soft hyphen
    "\u00a0": " ",  # Non-breaking space
}

# Known extraction artifacts, applied in order
ARTIFACT_REPAIRS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"Bachelorof"), "Bachelor of"),
    (re.compile(r"Masterof"), "Master of"),
    (re.compile(r"Linkedln", re.IGNORECASE), "LinkedIn"),
]

# Contact labels moved onto their own line (Phone) or separated by a space (Email)
LABEL_SPACING: list[tuple[re.Pattern, str]] = [
    (re.compile(r"\s*Phone:[ \t]*"), "\nPhone: "),
    (re.compile(r"(?<=\S)[ \t]*Email:[ \t]*"), " Email: "),
    (re.compile(r"^[ \t]*Email:[ \t]*", re.MULTILINE), "Email: "),
]


class TextNormalizer:
    """
    Normalizer for raw extracted text.

    Instances hold only their configuration and are safe to share
    between threads.
    """

    def __init__(
        self,
        blank_line_collapse: Optional[int] = None,
        duplicate_probe_length: Optional[int] = None,
    ):
        """
        Initialize the normalizer.

        Args:
            blank_line_collapse: Maximum consecutive newlines kept
                (1 for the structurer, 2 for the auditor)
            duplicate_probe_length: Leading characters of the first half that
                must recur in the second half to count as duplicated content
        """
        parser_settings = get_settings().parser
        if blank_line_collapse is None:
            blank_line_collapse = parser_settings.blank_line_collapse
        if duplicate_probe_length is None:
            duplicate_probe_length = parser_settings.duplicate_probe_length
        if blank_line_collapse < 1 or duplicate_probe_length < 1:
            raise ValueError("blank_line_collapse and duplicate_probe_length must be positive")

        self.blank_line_collapse = blank_line_collapse
        self.duplicate_probe_length = duplicate_probe_length
        self._newline_run = re.compile(r"\n{%d,}" % (self.blank_line_collapse + 1))

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize resume text.

        The duplicate-collapse and cleanup steps are repeated until the text
        stops changing, so the output is a fixed point: normalizing it again
        returns it unchanged.

        Args:
            text: Raw extracted text (None is treated as empty)

        Returns:
            Normalized text, possibly empty
        """
        if not text:
            return ""

        current = text
        while True:
            normalized = self._clean(self._collapse_duplicate(current))
            if normalized == current:
                return normalized
            current = normalized

    def _collapse_duplicate(self, text: str) -> str:
        """Keep only the first half when the second half repeats its opening."""
        half = len(text) // 2
        first_half = text[:half]

        if len(first_half) < self.duplicate_probe_length:
            return text

        if first_half[: self.duplicate_probe_length] in text[half:]:
            logger.debug(f"Duplicated extraction detected, dropping {len(text) - half} chars")
            return first_half

        return text

    def _clean(self, text: str) -> str:
        """Repair artifacts, space contact labels and collapse blank lines."""
        for old, new in INVISIBLE_CHARACTERS.items():
            text = text.replace(old, new)

        for pattern, replacement in ARTIFACT_REPAIRS:
            text = pattern.sub(replacement, text)

        for pattern, replacement in LABEL_SPACING:
            text = pattern.sub(replacement, text)

        text = self._newline_run.sub("\n" * self.blank_line_collapse, text)

        return text.strip()


def normalize_text(text: Optional[str], blank_line_collapse: Optional[int] = None) -> str:
    """Normalize text with default settings."""
    return TextNormalizer(blank_line_collapse=blank_line_collapse).normalize(text)
