"""
lstc-calendar Exception Hierarchy

Domain-specific exceptions for date classification.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: LSTC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CalendarError(Exception):
    """
    Base exception for all lstc-calendar errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (LSTC_*)
        details: Additional context about the error
        pack_name: Associated calendar pack if applicable
    """
    message: str
    code: str = "LSTC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    pack_name: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.pack_name:
            parts.append(f"(pack: {self.pack_name})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/CLI output."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.pack_name:
            result["pack_name"] = self.pack_name
        return result


# =============================================================================
# Engine Errors
# =============================================================================

@dataclass
class InvalidDateError(CalendarError):
    """The (year, month, day) triple is not a real calendar date."""
    code: str = "LSTC_INVALID_DATE"


@dataclass
class InvalidEntryError(CalendarError):
    """A calendar entry was built from values of the wrong shape."""
    code: str = "LSTC_INVALID_ENTRY"


@dataclass
class CalendarFrozenError(CalendarError):
    """Cannot add entries to a frozen calendar."""
    code: str = "LSTC_CALENDAR_FROZEN"


# =============================================================================
# Calendar Pack Errors
# =============================================================================

@dataclass
class PackLoadError(CalendarError):
    """Failed to load calendar pack from file."""
    code: str = "LSTC_PACK_LOAD_ERROR"


@dataclass
class PackValidationError(CalendarError):
    """Calendar pack schema validation failed."""
    code: str = "LSTC_PACK_VALIDATION_ERROR"


@dataclass
class PackVersionMismatch(CalendarError):
    """Pack schema version doesn't match the supported version."""
    code: str = "LSTC_PACK_VERSION_MISMATCH"


@dataclass
class PackNotFoundError(CalendarError):
    """Requested built-in calendar pack not found."""
    code: str = "LSTC_PACK_NOT_FOUND"
