"""
Constants Package

Centralized constants for the tutor matching service.

Exports:
- Threshold values (neutral scores, reason thresholds)
- Global constants (headers, weekly calendar layout, algorithm ids)

Safe to import anywhere - no heavy dependencies or circular imports.
"""

from .thresholds import (
    NEUTRAL_SCORE,
    SUBJECT_PARTIAL_SCORE,
    AVAILABILITY_MISS_SCORE,
    MAX_RATING,
    PRICE_BELOW_BUDGET_SCORE,
    PRICE_OVER_BUDGET_TOLERANCE,
    LANGUAGE_MISS_SCORE,
    PERFECT_SUBJECT_THRESHOLD,
    GOOD_SUBJECT_THRESHOLD,
    HIGH_RATING_THRESHOLD,
    WITHIN_BUDGET_THRESHOLD,
    AVAILABLE_THRESHOLD,
    MAX_REASONS,
    SCORE_DECIMALS,
    clamp_score,
)

from .constants import (
    TRACE_HEADER_NAME,
    WEEKDAY_NAMES,
    MINUTES_PER_DAY,
    GRID_FIRST_HOUR,
    GRID_LAST_HOUR,
    GRID_SLOT_MINUTES,
    ALGORITHM_MATCHING,
    ALGORITHM_AVAILABILITY_EDITOR,
    normalize_trace_id,
    short_request_id,
    weekday_name,
    weekday_index,
)

__all__ = [
    # Thresholds
    "NEUTRAL_SCORE",
    "SUBJECT_PARTIAL_SCORE",
    "AVAILABILITY_MISS_SCORE",
    "MAX_RATING",
    "PRICE_BELOW_BUDGET_SCORE",
    "PRICE_OVER_BUDGET_TOLERANCE",
    "LANGUAGE_MISS_SCORE",
    "PERFECT_SUBJECT_THRESHOLD",
    "GOOD_SUBJECT_THRESHOLD",
    "HIGH_RATING_THRESHOLD",
    "WITHIN_BUDGET_THRESHOLD",
    "AVAILABLE_THRESHOLD",
    "MAX_REASONS",
    "SCORE_DECIMALS",
    "clamp_score",
    # Global
    "TRACE_HEADER_NAME",
    "WEEKDAY_NAMES",
    "MINUTES_PER_DAY",
    "GRID_FIRST_HOUR",
    "GRID_LAST_HOUR",
    "GRID_SLOT_MINUTES",
    "ALGORITHM_MATCHING",
    "ALGORITHM_AVAILABILITY_EDITOR",
    "normalize_trace_id",
    "short_request_id",
    "weekday_name",
    "weekday_index",
]
