"""
Factory for selecting the document extractor for a declared format.
"""

from pathlib import Path
from typing import BinaryIO, Optional, Union

from resume_ats.exceptions import UnsupportedFormatError
from resume_ats.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult, normalize_format
from .docx_extractor import DOCXExtractor
from .pdf_extractor import PDFExtractor
from .text_extractor import TextExtractor

logger = get_logger(__name__)

DocumentSource = Union[str, Path, bytes, BinaryIO]


class ExtractorFactory:
    """
    Factory class for document extractors.

    Selects the extractor by declared format; unknown formats raise
    UnsupportedFormatError carrying the rejected extension.
    """

    _extractors: tuple[BaseExtractor, ...] = (
        PDFExtractor(),
        DOCXExtractor(),
        TextExtractor(),
    )

    @classmethod
    def get_extractor(cls, declared_format: str) -> Optional[BaseExtractor]:
        """
        Get the extractor for a declared format.

        Args:
            declared_format: Format tag, extension or filename

        Returns:
            Matching extractor or None if the format is not supported
        """
        file_format = normalize_format(declared_format)

        for extractor in cls._extractors:
            if file_format in extractor.supported_formats:
                return extractor

        logger.warning(f"No extractor found for format: {file_format or '(none)'}")
        return None

    @classmethod
    def require_extractor(cls, declared_format: str) -> BaseExtractor:
        """Get the extractor for a declared format or raise UnsupportedFormatError."""
        extractor = cls.get_extractor(declared_format)
        if extractor is None:
            raise UnsupportedFormatError(normalize_format(declared_format))
        return extractor

    @classmethod
    def extract(cls, file_path: str | Path) -> ExtractionResult:
        """
        Extract text from a file, using its suffix as the declared format.

        Raises:
            UnsupportedFormatError: The suffix is not a supported format
            ExtractionError: The decoder rejected the document
        """
        return cls.require_extractor(Path(file_path).suffix).extract(file_path)

    @classmethod
    def extract_from_bytes(
        cls, content: bytes, declared_format: str, filename: str = "document"
    ) -> ExtractionResult:
        """
        Extract text from file bytes.

        Raises:
            UnsupportedFormatError: The declared format is not supported
            ExtractionError: The decoder rejected the document
        """
        extractor = cls.require_extractor(declared_format)
        return extractor.extract_from_bytes(content, normalize_format(declared_format), filename)

    @classmethod
    def extract_from_file_object(
        cls, file_obj: BinaryIO, declared_format: str, filename: str = "document"
    ) -> ExtractionResult:
        """
        Extract text from an open binary stream.

        Raises:
            UnsupportedFormatError: The declared format is not supported
            ExtractionError: The decoder rejected the document
        """
        extractor = cls.require_extractor(declared_format)
        return extractor.extract_from_file_object(file_obj, normalize_format(declared_format), filename)

    @classmethod
    def get_supported_formats(cls) -> list[str]:
        """Get list of all supported format tags."""
        formats = []
        for extractor in cls._extractors:
            formats.extend(extractor.supported_formats)
        return formats

    @classmethod
    def is_supported(cls, declared_format: str) -> bool:
        """Check if a declared format is supported."""
        return normalize_format(declared_format) in cls.get_supported_formats()


def extract_text(source: DocumentSource, declared_format: Optional[str] = None) -> str:
    """
    Convert a document into raw text.

    Args:
        source: Path, raw bytes or binary file object
        declared_format: Format tag; defaults to the path suffix for paths

    Returns:
        The extracted, un-normalized text

    Raises:
        UnsupportedFormatError: The declared format is not supported
        ExtractionError: The decoder rejected the document
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        extractor = ExtractorFactory.require_extractor(declared_format or path.suffix)
        return extractor.extract(path, declared_format).text

    if declared_format is None:
        raise UnsupportedFormatError("")

    if isinstance(source, (bytes, bytearray)):
        return ExtractorFactory.extract_from_bytes(bytes(source), declared_format).text

    return ExtractorFactory.extract_from_file_object(source, declared_format).text


# Convenience function
def get_extractor(declared_format: str) -> Optional[BaseExtractor]:
    """Get the extractor for a declared format."""
    return ExtractorFactory.get_extractor(declared_format)
