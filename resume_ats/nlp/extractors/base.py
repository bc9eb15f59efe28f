"""
Base extractor class for document text extraction.
"""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Optional

from resume_ats.exceptions import ExtractionError


# Maximum document size accepted for extraction (50MB)
MAX_FILE_SIZE = 50 * 1024 * 1024


@dataclass
class ExtractionResult:
    """Result of text extraction from a document."""

    text: str
    file_format: str
    page_count: int = 1
    metadata: dict = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        """Count words in extracted text."""
        return len(self.text.split())

    @property
    def char_count(self) -> int:
        """Count characters in extracted text."""
        return len(self.text)

    @property
    def is_empty(self) -> bool:
        """Check if extraction resulted in empty text."""
        return len(self.text.strip()) == 0


def normalize_format(declared_format: str) -> str:
    """
    Normalize a declared format tag.

    Accepts ``"pdf"``, ``".PDF"`` or a filename such as ``"cv.pdf"``.
    """
    value = (declared_format or "").strip().lower()
    if "." in value.lstrip("."):
        value = Path(value).suffix
    return value.lstrip(".")


class BaseExtractor(ABC):
    """
    Abstract base class for document text extractors.

    All format-specific extractors should inherit from this class.
    Extractors are stateless and raise ``ExtractionError`` when the
    decoder rejects the document.
    """

    @property
    @abstractmethod
    def supported_formats(self) -> tuple[str, ...]:
        """Return tuple of supported format tags (e.g., 'pdf', 'docx')."""

    def can_extract(self, declared_format: str) -> bool:
        """Check if this extractor handles the declared format."""
        return normalize_format(declared_format) in self.supported_formats

    def extract(self, file_path: str | Path, file_format: Optional[str] = None) -> ExtractionResult:
        """
        Extract text content from a document on disk.

        Args:
            file_path: Path to the document file
            file_format: Declared format tag (defaults to the path suffix)

        Returns:
            ExtractionResult containing the extracted text and metadata
        """
        path = self._validate_file(file_path)
        with open(path, "rb") as f:
            return self.extract_from_file_object(
                f, normalize_format(file_format or path.suffix), path.name
            )

    def extract_from_bytes(
        self, content: bytes, file_format: str, filename: str = "document"
    ) -> ExtractionResult:
        """
        Extract text content from document bytes.

        Args:
            content: Raw bytes of the document
            file_format: Declared format tag
            filename: Original filename (for diagnostics)

        Returns:
            ExtractionResult containing the extracted text and metadata
        """
        file_format = normalize_format(file_format)
        if len(content) > MAX_FILE_SIZE:
            raise ExtractionError(
                file_format,
                f"content too large: {len(content)} bytes (max: {MAX_FILE_SIZE})",
                filename,
            )
        return self.extract_from_file_object(io.BytesIO(content), file_format, filename)

    @abstractmethod
    def extract_from_file_object(
        self, file_obj: BinaryIO, file_format: str, filename: str = "document"
    ) -> ExtractionResult:
        """
        Extract text content from a binary file object.

        Args:
            file_obj: Seekable binary stream positioned at the document start
            file_format: Normalized format tag
            filename: Original filename (for diagnostics)

        Returns:
            ExtractionResult containing the extracted text and metadata
        """

    def _validate_file(self, file_path: str | Path) -> Path:
        """Validate that the file exists, is a regular file and is not oversized."""
        path = Path(file_path).resolve(strict=False)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if not path.is_file():
            raise IsADirectoryError(f"Path is not a file: {file_path}")

        size = path.stat().st_size
        if size > MAX_FILE_SIZE:
            raise ExtractionError(
                normalize_format(path.suffix),
                f"file too large: {size} bytes (max: {MAX_FILE_SIZE})",
                path.name,
            )

        return path
