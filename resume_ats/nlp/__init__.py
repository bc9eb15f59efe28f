"""
Text pipeline for resume_ats.

Provides document text extraction, normalization and resume structuring.

Main Components:
- ResumeParser: Main orchestrator for structuring resumes
- TextNormalizer: Shared text cleanup and duplicate collapse
- ExtractorFactory: Document text extraction (PDF, DOCX, TXT)
- ContactParser: Contact metadata extraction
- SectionParser: Section partitioning by header catalog
- classify_line: Presentation kind of a section line
"""

from .normalizer import TextNormalizer, normalize_text

from .extractors import (
    ExtractorFactory,
    ExtractionResult,
    BaseExtractor,
    PDFExtractor,
    DOCXExtractor,
    TextExtractor,
    extract_text,
    get_extractor,
)

from .parsers import (
    ContactParser,
    SectionParser,
    HeaderPattern,
    SECTION_HEADER_CATALOG,
)

from .resume_parser import (
    ResumeParser,
    get_resume_parser,
    structure_resume,
)

from .line_classifier import (
    LineKind,
    classify_line,
    dedupe_lines,
    strip_markdown,
)

__all__ = [
    # Normalization
    "TextNormalizer",
    "normalize_text",
    # Extractors
    "ExtractorFactory",
    "ExtractionResult",
    "BaseExtractor",
    "PDFExtractor",
    "DOCXExtractor",
    "TextExtractor",
    "extract_text",
    "get_extractor",
    # Parsers
    "ContactParser",
    "SectionParser",
    "HeaderPattern",
    "SECTION_HEADER_CATALOG",
    # Orchestrator
    "ResumeParser",
    "get_resume_parser",
    "structure_resume",
    # Presentation
    "LineKind",
    "classify_line",
    "dedupe_lines",
    "strip_markdown",
]
