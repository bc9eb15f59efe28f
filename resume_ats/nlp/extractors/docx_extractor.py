"""
DOCX/DOC document text extractor.

Uses python-docx. Legacy binary .doc files are passed to the same decoder
and fail with ExtractionError when they are not OOXML packages.
"""

from typing import BinaryIO

from docx import Document

from resume_ats.exceptions import ExtractionError
from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class DOCXExtractor(BaseExtractor):
    """Extractor for Microsoft Word documents (.docx, .doc)."""

    @property
    def supported_formats(self) -> tuple[str, ...]:
        return ("docx", "doc")

    def extract_from_file_object(
        self, file_obj: BinaryIO, file_format: str = "docx", filename: str = "document.docx"
    ) -> ExtractionResult:
        """Extract text from a DOCX stream."""
        try:
            doc = Document(file_obj)
        except Exception as e:
            logger.warning(f"{file_format.upper()} extraction failed for {filename}: {e}")
            reason = str(e) or type(e).__name__
            if file_format == "doc":
                reason += " (legacy .doc files must be converted to .docx)"
            raise ExtractionError(file_format, reason, filename) from e

        return self._process_document(doc, file_format)

    def _process_document(self, doc, file_format: str) -> ExtractionResult:
        """Process a python-docx Document object."""
        text_parts = []
        metadata = {"extractor": "python-docx"}
        warnings = []

        props = doc.core_properties
        metadata["document_properties"] = {
            "author": props.author,
            "title": props.title,
            "created": str(props.created) if props.created else None,
            "modified": str(props.modified) if props.modified else None,
        }

        # Extract paragraphs
        for paragraph in doc.paragraphs:
            text = paragraph.text.strip()
            if text:
                text_parts.append(text)

        # Extract text from tables, one row per line
        for table in doc.tables:
            for row in table.rows:
                row_text = []
                for cell in row.cells:
                    cell_text = cell.text.strip()
                    if cell_text and cell_text not in row_text:
                        row_text.append(cell_text)
                if row_text:
                    text_parts.append(" | ".join(row_text))

        # Count sections as "pages" (approximate)
        section_count = len(doc.sections) if doc.sections else 1

        full_text = "\n".join(text_parts)

        if not full_text.strip():
            warnings.append("Document appears to be empty or contains only images")

        return ExtractionResult(
            text=full_text,
            file_format=file_format,
            page_count=section_count,
            metadata=metadata,
            warnings=warnings,
        )
