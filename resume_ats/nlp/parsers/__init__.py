"""
Resume parsers for extracting structured information.

Each parser is responsible for one part of the structured resume:
contact metadata or the section partition.
"""

from .section_parser import (
    SECTION_HEADER_CATALOG,
    HeaderPattern,
    SectionParser,
    clean_header_candidate,
)
from .contact_parser import ContactParser

__all__ = [
    "SECTION_HEADER_CATALOG",
    "HeaderPattern",
    "SectionParser",
    "clean_header_candidate",
    "ContactParser",
]
