"""
lstc-calendar Calendar Pack Loader

Loads calendar packs from YAML or JSON files and dumps calendars back
to the same record format.

Converts Pydantic schema models to lstc-calendar domain models.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional, Union

import yaml
from pydantic import ValidationError

from ..engine import Calendar
from ..exceptions import (
    PackLoadError,
    PackNotFoundError,
    PackValidationError,
    PackVersionMismatch,
)
from ..models import CalendarEntry
from .schema import (
    SCHEMA_VERSION,
    CalendarEntrySchema,
    CalendarPackSchema,
    check_schema_version,
    validate_calendar_pack,
)

logger = logging.getLogger(__name__)

BUILTIN_PACKS_DIR = Path(__file__).parent / "builtin"

Classifier = Callable[[Any], Any]


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_entry(
    schema: CalendarEntrySchema,
    classification: Optional[Classifier] = None,
) -> CalendarEntry:
    """Convert CalendarEntrySchema to CalendarEntry model."""
    label = schema.classification
    if classification is not None:
        label = classification(label)
    return CalendarEntry(
        classification=label,
        year=schema.year,
        month=schema.month,
        day=schema.day,
        week_of_month=schema.week_of_month,
        week_of_year=schema.week_of_year,
        days_of_week=frozenset(schema.days_of_week) if schema.days_of_week is not None else None,
        offset=schema.offset,
        description=schema.description,
    )


def _convert_calendar_pack(
    schema: CalendarPackSchema,
    classification: Optional[Classifier] = None,
) -> Calendar:
    """Convert CalendarPackSchema to a Calendar, preserving entry order."""
    try:
        entries = [_convert_entry(e, classification) for e in schema.entries]
    except (TypeError, ValueError) as e:
        raise PackValidationError(
            message=f"Unknown classification in calendar pack: {e}",
            details={"error": str(e)},
            pack_name=schema.name,
        ) from e
    return Calendar(entries)


# =============================================================================
# Calendar Pack Loader
# =============================================================================

class CalendarPackLoader:
    """
    Loads calendar packs from YAML or JSON files.

    Usage:
        loader = CalendarPackLoader(classification=DayType)
        calendar = loader.load("path/to/calendar.yaml")
    """

    def __init__(
        self,
        strict_version: bool = True,
        classification: Optional[Classifier] = None,
    ):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
            classification: Optional converter applied to every raw label
                (e.g. an Enum class)
        """
        self.strict_version = strict_version
        self.classification = classification

        # Loaded pack metadata, keyed by pack name
        self._packs: dict[str, CalendarPackSchema] = {}

    def load(self, path: Union[str, Path]) -> Calendar:
        """
        Load a calendar pack from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Calendar with the pack's entries in file order

        Raises:
            PackLoadError: If file cannot be read or parsed
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise PackLoadError(
                message=f"Failed to load calendar pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        return self.load_data(data, source=str(path))

    def load_data(self, data: Any, source: str = "<data>") -> Calendar:
        """
        Build a calendar from already-parsed pack data.

        Raises:
            PackValidationError: If validation fails
            PackVersionMismatch: If schema version incompatible
        """
        if not isinstance(data, dict):
            raise PackValidationError(
                message=f"Calendar pack must be a mapping, got {type(data).__name__}",
                details={"source": source},
            )

        if not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            if self.strict_version:
                raise PackVersionMismatch(
                    message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                    details={
                        "pack_version": pack_version,
                        "expected_version": SCHEMA_VERSION,
                        "source": source,
                    },
                    pack_name=data.get("name"),
                )
            logger.warning(
                "Loading %s with schema version %s (expected %s)",
                source, pack_version, SCHEMA_VERSION,
            )

        try:
            schema = validate_calendar_pack(data)
        except ValidationError as e:
            raise PackValidationError(
                message=f"Calendar pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "source": source},
                pack_name=data.get("name"),
            ) from e

        calendar = _convert_calendar_pack(schema, self.classification)
        self._packs[schema.name] = schema

        logger.info(
            "Loaded calendar pack %s from %s (%d entries)",
            schema.name, source, len(calendar),
        )
        return calendar

    def load_builtin(self, name: str) -> Calendar:
        """
        Load one of the packs bundled with lstc-calendar.

        Raises:
            PackNotFoundError: If no bundled pack has that name
        """
        available = list_builtin_packs()
        if name not in available:
            raise PackNotFoundError(
                message=f"No built-in calendar pack named '{name}'",
                details={"available": available},
                pack_name=name,
            )
        return self.load(BUILTIN_PACKS_DIR / f"{name}.yaml")

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                return json.load(f)
            else:
                # Try YAML first, then JSON
                content = f.read()
                try:
                    return yaml.safe_load(content)
                except yaml.YAMLError:
                    return json.loads(content)

    def get_pack(self, name: str) -> Optional[CalendarPackSchema]:
        """Get the validated schema of a loaded pack by name."""
        return self._packs.get(name)

    def list_packs(self) -> list[str]:
        """List names of all loaded packs."""
        return list(self._packs.keys())


# =============================================================================
# Dumping
# =============================================================================

def dump_calendar_pack(
    calendar: Calendar,
    name: str,
    description: str = "",
) -> dict[str, Any]:
    """
    Serialize a calendar to a pack dictionary.

    Entries are written in insertion order, so loading the result
    rebuilds a calendar with the same precedence.
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "name": name,
        "description": description,
        "entries": [entry.to_dict() for entry in calendar.entries],
    }


def dump_calendar_pack_to_string(
    calendar: Calendar,
    name: str,
    description: str = "",
    format: str = "yaml",
) -> str:
    """Serialize a calendar to a YAML or JSON string."""
    data = dump_calendar_pack(calendar, name, description)
    if format.lower() == "json":
        return json.dumps(data, indent=2)
    return yaml.safe_dump(data, sort_keys=False)


# =============================================================================
# Convenience Functions
# =============================================================================

def list_builtin_packs() -> list[str]:
    """List bundled calendar packs (without .yaml extension)."""
    return sorted(p.stem for p in BUILTIN_PACKS_DIR.glob("*.yaml"))


def load_calendar_pack(
    path: Union[str, Path],
    classification: Optional[Classifier] = None,
) -> Calendar:
    """
    Load a calendar pack from a file.

    Convenience function that creates a temporary loader.
    """
    loader = CalendarPackLoader(classification=classification)
    return loader.load(path)


def load_calendar_pack_from_string(
    content: str,
    format: str = "yaml",
    classification: Optional[Classifier] = None,
) -> Calendar:
    """
    Load a calendar pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"
        classification: Optional converter applied to every raw label

    Raises:
        PackLoadError: If the content cannot be parsed
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (ValueError, yaml.YAMLError) as e:
        raise PackLoadError(
            message=f"Failed to parse calendar pack: {e}",
            details={"format": format, "error": str(e)},
        ) from e

    loader = CalendarPackLoader(classification=classification)
    return loader.load_data(data, source=f"<{format} string>")


def load_builtin_pack(
    name: str,
    classification: Optional[Classifier] = None,
) -> Calendar:
    """Load a bundled calendar pack by name."""
    loader = CalendarPackLoader(classification=classification)
    return loader.load_builtin(name)
