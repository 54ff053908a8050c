"""
lstc-calendar Engine

The Calendar rule set and its classification algorithm.
"""
from __future__ import annotations

from .calendar import Calendar

__all__ = [
    "Calendar",
]
