"""
Global Constants

Non-business constants used throughout the application: header names, the
weekly calendar layout and response metadata. Domain thresholds live in
thresholds.py.
"""

import uuid
from typing import Optional

# ============================================================================
# HTTP Headers
# ============================================================================

TRACE_HEADER_NAME = "x-request-id"


# ============================================================================
# Weekly Calendar
# ============================================================================

# Index in this tuple is the weekday value stored on AvailabilitySlot (0 = Monday)
WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MINUTES_PER_DAY = 24 * 60

# Editor grid: one cell per hour from 06:00 to 22:00 inclusive
GRID_FIRST_HOUR = 6
GRID_LAST_HOUR = 22
GRID_SLOT_MINUTES = 60


# ============================================================================
# Response Metadata
# ============================================================================

ALGORITHM_MATCHING = "weighted_factor_matching"
ALGORITHM_AVAILABILITY_EDITOR = "weekly_toggle_editor"


# ============================================================================
# Helper Functions
# ============================================================================

def normalize_trace_id(trace_id: Optional[str]) -> str:
    """
    Normalize trace ID, generate a new one if missing/blank.

    Example:
        >>> normalize_trace_id(" abc123 ")
        'abc123'
    """
    if not trace_id or not isinstance(trace_id, str) or not trace_id.strip():
        return str(uuid.uuid4())
    return trace_id.strip()


def short_request_id(trace_id: str) -> str:
    """First 8 characters of a trace ID, for forwarding to the store."""
    if not trace_id or not isinstance(trace_id, str):
        return "unknown"
    return trace_id[:8]


def weekday_name(weekday: int) -> str:
    """
    Display name for a weekday index.

    Example:
        >>> weekday_name(0)
        'Monday'
    """
    return WEEKDAY_NAMES[weekday]


def weekday_index(name: str) -> Optional[int]:
    """
    Weekday index for a display name (case-insensitive), None if unknown.

    Example:
        >>> weekday_index("friday")
        4
    """
    lookup = name.strip().lower() if isinstance(name, str) else ""
    for index, day in enumerate(WEEKDAY_NAMES):
        if day.lower() == lookup:
            return index
    return None
