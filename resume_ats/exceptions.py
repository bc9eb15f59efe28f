"""
Exception taxonomy for document extraction.

Normalization, structuring and auditing never raise; only turning a
document's bytes into text can fail.
"""

from typing import Optional


class ResumeATSError(Exception):
    """Base class for all errors raised by the toolkit."""


class UnsupportedFormatError(ResumeATSError):
    """The declared file extension is not one the extractors handle."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file format: {extension or '(none)'}")


class ExtractionError(ResumeATSError):
    """
    A decoder rejected the document (corrupt, encrypted or malformed).

    The decoder's own message is kept in ``reason`` and the original
    exception is chained as ``__cause__``.
    """

    def __init__(self, file_format: str, reason: str, filename: Optional[str] = None):
        self.file_format = file_format
        self.reason = reason
        self.filename = filename
        target = f" '{filename}'" if filename else ""
        super().__init__(f"Could not extract text from {file_format.upper()}{target}: {reason}")
