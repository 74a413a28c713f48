"""
SelectionV1 Pydantic schema for selection metadata.

This schema describes which variant of a bundle was selected and under
which policy. It is written as a sidecar file next to published output
so that the Publishing Pipeline can trace a document back to its bundle.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, model_validator


class SelectionV1(BaseModel):
    """Schema for selection metadata.

    Attributes:
        selection_version: Schema version (always "v1")
        source_file: Path to the bundle file (None for stdin/in-memory)
        policy: Selection policy in its string form (first, last, index(N))
        variant_index: Ordinal of the selected variant
        variant_count: Number of variants in the bundle
        character_count: Length of the selected variant
        timestamp: When the selection was performed
    """

    selection_version: str = Field(
        default="v1",
        description="Schema version identifier"
    )
    source_file: Optional[str] = Field(
        default=None,
        description="Path to the source bundle file"
    )
    policy: str = Field(
        ...,
        description="Selection policy applied (first, last, index(N))"
    )
    variant_index: int = Field(
        ...,
        ge=0,
        description="Ordinal of the selected variant"
    )
    variant_count: int = Field(
        ...,
        ge=1,
        description="Total number of variants in the bundle"
    )
    character_count: int = Field(
        ...,
        ge=0,
        description="Character count of the selected variant"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="UTC timestamp of the selection"
    )

    @model_validator(mode="after")
    def check_index_within_count(self) -> "SelectionV1":
        """Ensure the selected ordinal exists in the bundle."""
        if self.variant_index >= self.variant_count:
            raise ValueError(
                f"variant_index {self.variant_index} must be less than "
                f"variant_count {self.variant_count}"
            )
        return self

    @field_serializer('timestamp')
    def serialize_timestamp(self, timestamp: datetime) -> str:
        """Serialize timestamp to ISO format."""
        return timestamp.isoformat()
