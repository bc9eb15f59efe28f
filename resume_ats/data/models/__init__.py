"""
Pydantic data models for the resume ATS toolkit.

This module provides the result models handed to external collaborators:
the structured resume and the ATS audit result.
"""

# Base models
from .base import EmbeddedModel, FrozenModel

# Resume models
from .resume import ContactMetadata, ParsedResume

# ATS models
from .ats import AtsAuditResult, AuditFinding

__all__ = [
    # Base
    "EmbeddedModel",
    "FrozenModel",
    # Resume
    "ContactMetadata",
    "ParsedResume",
    # ATS
    "AtsAuditResult",
    "AuditFinding",
]
