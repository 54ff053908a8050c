"""
lstc-calendar Calendar Packs

Schema validation, loading and dumping of calendar packs.

Calendar packs are YAML or JSON files holding an ordered list of
calendar entry records. Later records take precedence, exactly as if
they had been added to a Calendar in file order.

Usage:
    from lstc_calendar.packs import load_calendar_pack, dump_calendar_pack

    calendar = load_calendar_pack("path/to/calendar.yaml", classification=DayType)

    # Bundled packs
    calendar = load_builtin_pack("england_and_wales", classification=DayType)

    # Round-trip a calendar built in code
    data = dump_calendar_pack(calendar, name="my-calendar")
"""
from __future__ import annotations

from .loader import (
    BUILTIN_PACKS_DIR,
    CalendarPackLoader,
    dump_calendar_pack,
    dump_calendar_pack_to_string,
    list_builtin_packs,
    load_builtin_pack,
    load_calendar_pack,
    load_calendar_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    CalendarEntrySchema,
    CalendarPackSchema,
    check_schema_version,
    validate_calendar_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "BUILTIN_PACKS_DIR",
    "CalendarPackLoader",
    "load_calendar_pack",
    "load_calendar_pack_from_string",
    "load_builtin_pack",
    "list_builtin_packs",
    # Dumping
    "dump_calendar_pack",
    "dump_calendar_pack_to_string",
    # Validation
    "validate_calendar_pack",
    "check_schema_version",
    # Schemas
    "CalendarPackSchema",
    "CalendarEntrySchema",
]
