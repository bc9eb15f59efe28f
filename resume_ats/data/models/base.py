"""
Base model classes for the resume ATS data models.

Provides common configuration shared across all result models.
"""

from pydantic import BaseModel, ConfigDict


class EmbeddedModel(BaseModel):
    """
    Base model for result payloads.

    Results are handed to external collaborators (persistence, HTTP
    responses, PDF regeneration) as plain JSON, so enums serialize by value.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )


class FrozenModel(EmbeddedModel):
    """Base model for results that must not change once created."""

    model_config = ConfigDict(frozen=True)
