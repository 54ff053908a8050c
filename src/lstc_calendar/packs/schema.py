"""
lstc-calendar Calendar Pack Schemas

Pydantic models for validating calendar pack YAML/JSON files.

A calendar pack is an ordered list of entry records. Order matters:
records are inserted in file order, so later records take precedence.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check the major version for compatibility
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ..models import Weekday


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Entry Schema
# =============================================================================

class CalendarEntrySchema(BaseModel):
    """Schema for a single calendar entry record."""
    classification: Any = Field(..., description="Label returned when the entry matches")
    year: Optional[int] = Field(None, description="Exact year")
    month: Optional[int] = Field(None, ge=1, le=12, description="Exact month (1-12)")
    day: Optional[int] = Field(None, ge=1, le=31, description="Exact day of month (1-31)")
    week_of_month: Optional[int] = Field(
        None, description="Signed 7-day bucket; negative counts from month end"
    )
    week_of_year: Optional[int] = Field(
        None, ge=1, le=53, description="ISO 8601 week number"
    )
    days_of_week: Optional[list[Weekday]] = Field(
        None, description="Weekday names (e.g. [sat, sun]); omitted = any day"
    )
    offset: int = Field(0, description="Days to move the date back before matching")
    description: Optional[str] = Field(None, description="Human-readable note")

    @field_validator("classification")
    @classmethod
    def validate_classification(cls, v: Any) -> Any:
        """A classification must be present and not null."""
        if v is None:
            raise ValueError("classification must not be null")
        return v

    @field_validator("days_of_week", mode="before")
    @classmethod
    def validate_days_of_week(cls, v: Any) -> Any:
        """Accept weekday names in any case, or a single name."""
        if v is None:
            return v
        if isinstance(v, (str, int)):
            v = [v]
        if not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError(
                f"days_of_week must be a weekday name or a list of them, got {type(v).__name__}"
            )
        return [Weekday.parse(item) for item in v]

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Pack Schema
# =============================================================================

class CalendarPackSchema(BaseModel):
    """Schema for a complete calendar pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    name: str = Field(..., min_length=1, description="Pack name")
    description: str = Field("", description="What this calendar models")
    entries: list[CalendarEntrySchema] = Field(
        default_factory=list,
        description="Entry records in insertion order (later entries win)",
    )

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_calendar_pack(data: dict[str, Any]) -> CalendarPackSchema:
    """
    Validate a calendar pack dictionary against the schema.

    Args:
        data: Dictionary loaded from YAML/JSON

    Returns:
        Validated CalendarPackSchema

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return CalendarPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a calendar pack's schema version is compatible.

    Only the major version has to match.
    """
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    pack_major = pack_version.split(".")[0]
    current_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == current_major
