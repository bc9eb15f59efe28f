"""
PDF document text extractor.

Uses two extraction methods for robust text extraction:
1. pdfplumber - Primary method, good for structured text
2. pypdf - Fallback method
"""

from typing import BinaryIO

import pdfplumber
from pypdf import PdfReader

from resume_ats.exceptions import ExtractionError
from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)

# pdfplumber output shorter than this triggers the pypdf fallback
MIN_PRIMARY_TEXT_LENGTH = 50


class PDFExtractor(BaseExtractor):
    """Extractor for PDF documents."""

    @property
    def supported_formats(self) -> tuple[str, ...]:
        return ("pdf",)

    def extract_from_file_object(
        self, file_obj: BinaryIO, file_format: str = "pdf", filename: str = "document.pdf"
    ) -> ExtractionResult:
        """Extract text from a PDF stream."""
        warnings: list[str] = []
        text, page_count, metadata = "", 0, {}

        # Try pdfplumber first (better for structured documents)
        try:
            text, page_count, metadata = self._extract_with_pdfplumber(file_obj)
        except Exception as e:
            logger.debug(f"pdfplumber could not read {filename}: {e}")

        if text and len(text.strip()) > MIN_PRIMARY_TEXT_LENGTH:
            return ExtractionResult(
                text=text,
                file_format="pdf",
                page_count=page_count,
                metadata=metadata,
                warnings=warnings,
            )

        # Fallback to pypdf
        warnings.append("pdfplumber extraction yielded limited text, trying pypdf")
        file_obj.seek(0)
        try:
            fallback_text, fallback_pages, fallback_meta = self._extract_with_pypdf(file_obj, filename)
        except Exception as e:
            if text.strip():
                warnings.append(f"pypdf fallback failed: {e}")
                return ExtractionResult(
                    text=text,
                    file_format="pdf",
                    page_count=page_count,
                    metadata=metadata,
                    warnings=warnings,
                )
            logger.warning(f"PDF extraction failed for {filename}: {e}")
            if isinstance(e, ExtractionError):
                raise
            raise ExtractionError("pdf", str(e), filename) from e

        if len(fallback_text.strip()) < len(text.strip()):
            fallback_text, fallback_pages, fallback_meta = text, page_count, metadata

        if len(fallback_text.strip()) < 10:
            warnings.append("PDF may be image-based or contain no text layer")

        return ExtractionResult(
            text=fallback_text,
            file_format="pdf",
            page_count=fallback_pages,
            metadata=fallback_meta,
            warnings=warnings,
        )

    def _extract_with_pdfplumber(self, file_obj: BinaryIO) -> tuple[str, int, dict]:
        """Extract text using pdfplumber."""
        text_parts = []
        metadata = {"extractor": "pdfplumber"}

        with pdfplumber.open(file_obj) as pdf:
            page_count = len(pdf.pages)
            metadata["page_count"] = page_count

            if pdf.metadata:
                metadata["pdf_metadata"] = {
                    k: v for k, v in pdf.metadata.items()
                    if v and isinstance(v, str)
                }

            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)

        return "\n\n".join(text_parts), page_count, metadata

    def _extract_with_pypdf(self, file_obj: BinaryIO, filename: str) -> tuple[str, int, dict]:
        """Extract text using pypdf."""
        text_parts = []
        metadata = {"extractor": "pypdf"}

        reader = PdfReader(file_obj)
        # Owner-password-only PDFs open with an empty user password
        if reader.is_encrypted and not reader.decrypt(""):
            raise ExtractionError("pdf", "document is encrypted", filename)

        page_count = len(reader.pages)
        metadata["page_count"] = page_count

        if reader.metadata:
            metadata["pdf_metadata"] = {
                k: str(v) for k, v in reader.metadata.items()
                if v and k.startswith("/")
            }

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

        return "\n\n".join(text_parts), page_count, metadata
