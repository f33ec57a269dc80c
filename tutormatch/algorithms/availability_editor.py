"""
Availability Editor and Booking View

Grid-facing wrappers around AvailabilityModel:

- AvailabilityEditor: the tutor's weekly schedule editor. Validates each click
  against the hourly grid (06:00-22:00, Monday-Sunday) before toggling and
  hands the resulting slot list to the caller for commit.
- BookingSelectionView: read-only grid for a student picking a lesson time.
  Never mutates the model; highlighting uses a caller-supplied selection set.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from tutormatch.constants import (
    GRID_FIRST_HOUR,
    GRID_LAST_HOUR,
    WEEKDAY_NAMES,
    weekday_index,
)
from tutormatch.core.errors import ValidationError
from tutormatch.algorithms.availability import AvailabilityModel, SlotState
from tutormatch.schemas.availability import AvailabilitySlot

logger = logging.getLogger(__name__)


# ============================================================================
# Grid Layout
# ============================================================================

def format_time_label(minutes: int) -> str:
    """
    12-hour clock label for a minute-of-day on the hour grid.

    Example:
        >>> format_time_label(540)
        '9:00 AM'
        >>> format_time_label(780)
        '1:00 PM'
    """
    hour, minute = divmod(minutes, 60)
    suffix = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minute:02d} {suffix}"


TIME_SLOTS: Tuple[Dict[str, Any], ...] = tuple(
    {"hour": hour, "minutes": hour * 60, "display": format_time_label(hour * 60)}
    for hour in range(GRID_FIRST_HOUR, GRID_LAST_HOUR + 1)
)

GRID_MINUTES = frozenset(slot["minutes"] for slot in TIME_SLOTS)


def validate_grid_cell(weekday: Any, minute: Any) -> None:
    """
    Reject cells outside the editor grid.

    Raises:
        ValidationError: weekday not in 0..6 or minute not an hour between
            06:00 and 22:00
    """
    if isinstance(weekday, bool) or not isinstance(weekday, int) or not 0 <= weekday <= 6:
        raise ValidationError(
            "Weekday must be an integer between 0 (Monday) and 6 (Sunday)",
            details={"weekday": weekday}
        )
    if isinstance(minute, bool) or not isinstance(minute, int) or minute not in GRID_MINUTES:
        raise ValidationError(
            f"Minute must be a whole hour between {GRID_FIRST_HOUR:02d}:00 and {GRID_LAST_HOUR:02d}:00",
            details={"minute": minute}
        )


# ============================================================================
# Editor
# ============================================================================

class AvailabilityEditor:
    """
    Single-session editor over a local copy of a tutor's weekly slots.

    Nothing is persisted here; commit_payload() is what the caller replaces
    the stored schedule with.
    """

    def __init__(self, slots: Optional[Iterable[Any]] = None):
        self.model = AvailabilityModel(slots)
        self.dirty = False

    def toggle(self, weekday: int, minute: int) -> SlotState:
        validate_grid_cell(weekday, minute)
        new_state = self.model.toggle(weekday, minute)
        self.dirty = True
        logger.debug(f"Toggled {WEEKDAY_NAMES[weekday]} {format_time_label(minute)} -> {new_state.value}")
        return new_state

    def clear(self) -> None:
        """'Clear all' action."""
        self.model.clear()
        self.dirty = True

    def grid(self) -> List[Dict[str, Any]]:
        """One row per hour, one cell per weekday, with the cell state."""
        rows = []
        for time_slot in TIME_SLOTS:
            cells = []
            for weekday, day in enumerate(WEEKDAY_NAMES):
                state = self.model.state(weekday, time_slot["minutes"])
                cells.append({"weekday": weekday, "day": day, "state": state.value})
            rows.append({**time_slot, "cells": cells})
        return rows

    def commit_payload(self) -> List[AvailabilitySlot]:
        return self.model.slots


# ============================================================================
# Booking View
# ============================================================================

def _selection_key(item: Any) -> Optional[Tuple[str, str]]:
    if isinstance(item, dict):
        day, time = item.get("day"), item.get("time")
    elif isinstance(item, (tuple, list)) and len(item) == 2:
        day, time = item
    else:
        return None
    if not day or not time:
        return None
    return (str(day), str(time))


class BookingSelectionView:
    """
    Read-only availability grid used while booking.

    Args:
        slots: The tutor's weekly slots
        selected: Cells already picked, as {"day": "Monday", "time": "9:00 AM"}
            dicts or (day, time) pairs
    """

    def __init__(self, slots: Optional[Iterable[Any]] = None, selected: Optional[Iterable[Any]] = None):
        self.model = AvailabilityModel(slots)
        self._selected: Set[Tuple[str, str]] = set()
        for item in selected or []:
            key = _selection_key(item)
            if key is not None:
                self._selected.add(key)

    def is_available(self, weekday: int, minute: int) -> bool:
        return self.model.is_available(weekday, minute)

    def is_selected(self, day: str, time: str) -> bool:
        return (day, time) in self._selected

    def is_clickable(self, weekday: int, minute: int) -> bool:
        """Only free cells can be picked in the booking view."""
        return self.is_available(weekday, minute)

    def select(self, weekday: int, minute: int) -> Dict[str, Any]:
        """
        Pick a lesson start.

        Returns:
            {"day", "time", "weekday", "minutes"} for the chosen cell

        Raises:
            ValidationError: cell outside the grid or tutor not free then
        """
        validate_grid_cell(weekday, minute)
        if not self.is_available(weekday, minute):
            raise ValidationError(
                "Tutor is not available at the selected time",
                details={"weekday": weekday, "minute": minute}
            )
        return {
            "day": WEEKDAY_NAMES[weekday],
            "time": format_time_label(minute),
            "weekday": weekday,
            "minutes": minute,
        }

    def selected_cells(self) -> List[Dict[str, Any]]:
        """Current selection resolved to grid coordinates, unknown entries dropped."""
        labels = {slot["display"]: slot["minutes"] for slot in TIME_SLOTS}
        cells = []
        for day, time in sorted(self._selected):
            weekday = weekday_index(day)
            if weekday is None or time not in labels:
                continue
            cells.append({"day": day, "time": time, "weekday": weekday, "minutes": labels[time]})
        return cells

    def grid(self) -> List[Dict[str, Any]]:
        rows = []
        for time_slot in TIME_SLOTS:
            cells = []
            for weekday, day in enumerate(WEEKDAY_NAMES):
                available = self.is_available(weekday, time_slot["minutes"])
                cells.append({
                    "weekday": weekday,
                    "day": day,
                    "available": available,
                    "selected": available and self.is_selected(day, time_slot["display"]),
                    "clickable": available,
                })
            rows.append({**time_slot, "cells": cells})
        return rows
