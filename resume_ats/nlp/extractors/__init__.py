"""
File content extractors for various document formats.

Supports extraction of text from PDF, DOCX, DOC and TXT files.
"""

from .base import BaseExtractor, ExtractionResult, normalize_format
from .pdf_extractor import PDFExtractor
from .docx_extractor import DOCXExtractor
from .text_extractor import TextExtractor
from .extractor_factory import ExtractorFactory, extract_text, get_extractor

__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "normalize_format",
    "PDFExtractor",
    "DOCXExtractor",
    "TextExtractor",
    "ExtractorFactory",
    "extract_text",
    "get_extractor",
]
