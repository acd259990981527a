"""
Base Pydantic models for sitectl.

Provides common configuration shared by all sitectl models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SitectlBaseModel(BaseModel):
    """Base model for all sitectl Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
    """

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(SitectlBaseModel):
    """Immutable base model for values that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
