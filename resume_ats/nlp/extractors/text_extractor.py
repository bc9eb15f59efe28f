"""
Plain text document extractor.
"""

from typing import BinaryIO

from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class TextExtractor(BaseExtractor):
    """Extractor for plain text documents."""

    @property
    def supported_formats(self) -> tuple[str, ...]:
        return ("txt",)

    def extract_from_file_object(
        self, file_obj: BinaryIO, file_format: str = "txt", filename: str = "document.txt"
    ) -> ExtractionResult:
        """Decode text bytes as UTF-8."""
        content = file_obj.read()
        warnings = []

        try:
            text = content.decode("utf-8-sig")
            used_encoding = "utf-8"
        except UnicodeDecodeError:
            # latin-1 maps every byte, so this cannot fail
            text = content.decode("latin-1")
            used_encoding = "latin-1"
            warnings.append("File is not valid UTF-8; decoded as latin-1")
            logger.debug(f"{filename} is not valid UTF-8, fell back to latin-1")

        # Estimate page count (roughly 3000 chars per page)
        page_count = max(1, len(text) // 3000)

        return ExtractionResult(
            text=text,
            file_format="txt",
            page_count=page_count,
            metadata={
                "extractor": "plain_text",
                "encoding": used_encoding,
            },
            warnings=warnings,
        )
