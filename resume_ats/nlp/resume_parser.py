"""
Main resume parser orchestrator.

Coordinates text extraction, normalization, contact extraction and
section partitioning to turn a resume into a ParsedResume.
"""

import time
from pathlib import Path
from typing import Optional

from resume_ats.data.models import ParsedResume
from resume_ats.utils.logger import get_logger

from .extractors import ExtractorFactory
from .normalizer import TextNormalizer
from .parsers import ContactParser, SectionParser

logger = get_logger(__name__)


class ResumeParser:
    """
    Main resume parser that orchestrates the parsing pipeline.

    Pipeline:
    1. Extract text from document (PDF, DOCX, TXT)
    2. Normalize the text
    3. Extract contact metadata
    4. Partition the body into sections
    5. Count words

    The parser keeps no per-call state; one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        normalizer: Optional[TextNormalizer] = None,
        section_parser: Optional[SectionParser] = None,
        contact_parser: Optional[ContactParser] = None,
    ):
        """Initialize the resume parser with its component parsers."""
        self.normalizer = normalizer or TextNormalizer()
        self.section_parser = section_parser or SectionParser()
        self.contact_parser = contact_parser or ContactParser(self.section_parser)

    def structure(self, raw_text: Optional[str]) -> ParsedResume:
        """
        Structure raw resume text.

        Args:
            raw_text: Text as produced by an extractor (None is treated as empty)

        Returns:
            ParsedResume with normalized text, metadata, sections and word count
        """
        start_time = time.time()

        text = self.normalizer.normalize(raw_text)
        metadata = self.contact_parser.parse(text)
        sections = self.section_parser.partition(text)

        result = ParsedResume(
            raw_text=text,
            metadata=metadata,
            sections={key.value: content for key, content in sections.items()},
            word_count=len(text.split()),
        )

        elapsed_ms = int((time.time() - start_time) * 1000)
        logger.debug(
            f"Structured resume: {result.word_count} words, "
            f"{len(result.sections)} sections in {elapsed_ms} ms"
        )
        return result

    def parse_file(self, file_path: str | Path) -> ParsedResume:
        """
        Extract and structure a resume file.

        Raises:
            UnsupportedFormatError: The file suffix is not a supported format
            ExtractionError: The decoder rejected the document
        """
        extraction = ExtractorFactory.extract(file_path)
        for warning in extraction.warnings:
            logger.warning(f"{Path(file_path).name}: {warning}")
        return self.structure(extraction.text)

    def parse_bytes(
        self, content: bytes, filename: str, declared_format: Optional[str] = None
    ) -> ParsedResume:
        """
        Extract and structure resume bytes.

        Args:
            content: Raw file bytes
            filename: Original filename
            declared_format: Format tag; defaults to the filename suffix

        Raises:
            UnsupportedFormatError: The declared format is not supported
            ExtractionError: The decoder rejected the document
        """
        extraction = ExtractorFactory.extract_from_bytes(
            content, declared_format or Path(filename).suffix, filename
        )
        for warning in extraction.warnings:
            logger.warning(f"{filename}: {warning}")
        return self.structure(extraction.text)


# Singleton instance
_resume_parser: Optional[ResumeParser] = None


def get_resume_parser() -> ResumeParser:
    """Get the resume parser singleton instance."""
    global _resume_parser
    if _resume_parser is None:
        _resume_parser = ResumeParser()
    return _resume_parser


def structure_resume(raw_text: Optional[str]) -> ParsedResume:
    """Structure raw resume text with the shared parser."""
    return get_resume_parser().structure(raw_text)
