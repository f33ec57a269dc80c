"""
Factor Scorers

Six deterministic scorers, each mapping a tutor attribute and the matching
search preference to a score in [0, 1]:

- subject:      exact name 1.0, substring either way 0.7, otherwise 0.0
- availability: shares a requested weekday 1.0, otherwise 0.2
- rating:       rating_avg / 5
- price:        inside budget 1.0, below it 0.8, linear decay above it
- language:     spoken 1.0, not spoken 0.3
- verified:     1.0 / 0.0

A missing preference scores neutrally (0.5) everywhere except subject, where
no subject means no match. No scorer raises for missing or malformed input.
"""

import logging
import re
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from tutormatch.constants import (
    NEUTRAL_SCORE,
    SUBJECT_PARTIAL_SCORE,
    AVAILABILITY_MISS_SCORE,
    MAX_RATING,
    PRICE_BELOW_BUDGET_SCORE,
    PRICE_OVER_BUDGET_TOLERANCE,
    LANGUAGE_MISS_SCORE,
    clamp_score,
)
from tutormatch.schemas.availability import AvailabilitySlot
from tutormatch.schemas.criteria import SearchCriteria
from tutormatch.schemas.tutor import Tutor

logger = logging.getLogger(__name__)


class Factor(str, Enum):
    """The closed set of matching factors. Values are the breakdown keys."""
    SUBJECT = "subject"
    AVAILABILITY = "availability"
    RATING = "rating"
    PRICE = "price"
    LANGUAGE = "language"
    VERIFIED = "verified"


_NON_DIGITS = re.compile(r"\D")


# ============================================================================
# Scoring Functions
# ============================================================================


def _subject_name(subject: Any) -> str:
    if isinstance(subject, str):
        return subject
    if isinstance(subject, dict):
        return str(subject.get("name") or "")
    return str(getattr(subject, "name", "") or "")


def score_subject(subjects: Optional[Iterable[Any]], target: Optional[str]) -> float:
    """
    Score how well the tutor's subjects cover the requested subject.

    Args:
        subjects: SubjectOffering objects, dicts with a "name" or plain names
        target: Requested subject free text

    Returns:
        1.0 on a case-insensitive exact name, 0.7 when one name contains the
        other, 0.0 otherwise or when either side is empty
    """
    if not target or not target.strip() or not subjects:
        return 0.0

    wanted = target.strip().lower()
    names = [_subject_name(s).strip().lower() for s in subjects]
    names = [n for n in names if n]

    if any(name == wanted for name in names):
        return 1.0

    if any(wanted in name or name in wanted for name in names):
        return SUBJECT_PARTIAL_SCORE

    return 0.0


def _weekdays_of(items: Iterable[Any]) -> set:
    weekdays = set()
    for item in items:
        if isinstance(item, AvailabilitySlot):
            weekdays.add(item.weekday)
        elif isinstance(item, dict) and "weekday" in item:
            weekdays.add(item["weekday"])
        elif isinstance(item, int) and not isinstance(item, bool):
            weekdays.add(item)
    return weekdays


def score_availability(availability: Optional[Iterable[Any]], requested: Optional[Iterable[Any]]) -> float:
    """
    Day-level overlap between the tutor's slots and the requested days.

    Args:
        availability: Tutor's weekly slots (an AvailabilityModel or any iterable
            of slots)
        requested: Requested weekday indices or slots

    Returns:
        0.5 when either side is missing or empty, 1.0 if any tutor slot falls on
        a requested weekday, 0.2 otherwise
    """
    if requested is None or availability is None:
        return NEUTRAL_SCORE

    requested_days = _weekdays_of(requested)
    tutor_days = _weekdays_of(availability)
    if not requested_days or not tutor_days:
        return NEUTRAL_SCORE

    return 1.0 if tutor_days & requested_days else AVAILABILITY_MISS_SCORE


def score_rating(rating_avg: Optional[float]) -> float:
    """rating_avg / 5 capped at 1; unrated tutors score 0."""
    if not rating_avg or rating_avg <= 0:
        return 0.0
    return min(rating_avg / MAX_RATING, 1.0)


def parse_budget(budget: Any) -> Optional[Tuple[int, Optional[int]]]:
    """
    Parse a "<min>-<max>" budget string.

    Non-digit characters are stripped from each side before the integer parse,
    so "$25 - $50" works. An empty lower side means 0, an empty upper side
    means unbounded.

    Returns:
        (min_budget, max_budget or None), or None if there is nothing to parse

    Example:
        >>> parse_budget("25-50")
        (25, 50)
        >>> parse_budget("20-")
        (20, None)
        >>> parse_budget("cheap") is None
        True
    """
    if budget is None:
        return None

    parts = str(budget).split("-")
    if len(parts) < 2:
        return None

    low_digits = _NON_DIGITS.sub("", parts[0])
    high_digits = _NON_DIGITS.sub("", parts[1])
    if not low_digits and not high_digits:
        return None

    low = int(low_digits) if low_digits else 0
    high = int(high_digits) if high_digits else None
    return low, high


def score_price(price_per_hour: Optional[float], budget: Any) -> float:
    """
    Score a tutor's hourly price against the student's budget.

    Returns:
        0.5 when price or budget is missing or the budget cannot be parsed;
        1.0 inside [min, max]; 0.8 below min; above max a linear decay
        max(0, 1 - (price - max) / (max * 0.2))
    """
    if not price_per_hour or price_per_hour <= 0:
        return NEUTRAL_SCORE

    bounds = parse_budget(budget)
    if bounds is None:
        logger.debug(f"Unparsable budget {budget!r}, using neutral price score")
        return NEUTRAL_SCORE

    min_budget, max_budget = bounds

    if price_per_hour >= min_budget and (max_budget is None or price_per_hour <= max_budget):
        return 1.0

    if price_per_hour < min_budget:
        return PRICE_BELOW_BUDGET_SCORE

    over_budget = price_per_hour - max_budget
    tolerance = max_budget * PRICE_OVER_BUDGET_TOLERANCE
    if tolerance <= 0:
        return 0.0

    return max(0.0, 1.0 - over_budget / tolerance)


def score_language(languages: Optional[Iterable[str]], target: Optional[str]) -> float:
    """1.0 if the tutor speaks the target language, 0.3 if not, 0.5 without data."""
    if not target or not target.strip():
        return NEUTRAL_SCORE

    spoken = {str(code).strip().lower() for code in (languages or []) if code}
    if not spoken:
        return NEUTRAL_SCORE

    return 1.0 if target.strip().lower() in spoken else LANGUAGE_MISS_SCORE


def score_verification(verified: Any) -> float:
    return 1.0 if verified is True else 0.0


# ============================================================================
# Dispatch
# ============================================================================

FACTOR_SCORERS: Dict[Factor, Callable[[Tutor, SearchCriteria], float]] = {
    Factor.SUBJECT: lambda tutor, criteria: score_subject(tutor.subjects, criteria.subject),
    Factor.AVAILABILITY: lambda tutor, criteria: score_availability(
        tutor.availability, criteria.requested_weekdays()
    ),
    Factor.RATING: lambda tutor, criteria: score_rating(tutor.rating_avg),
    Factor.PRICE: lambda tutor, criteria: score_price(tutor.price_per_hour, criteria.budget),
    Factor.LANGUAGE: lambda tutor, criteria: score_language(tutor.languages, criteria.language),
    Factor.VERIFIED: lambda tutor, criteria: score_verification(tutor.verified),
}


def score_factors(tutor: Tutor, criteria: SearchCriteria) -> Dict[str, float]:
    """
    Run every factor scorer.

    Returns:
        Breakdown dict keyed by factor value ("subject", "availability", ...),
        in Factor order
    """
    breakdown = {}
    for factor in Factor:
        breakdown[factor.value] = clamp_score(FACTOR_SCORERS[factor](tutor, criteria))

    logger.debug(f"Factor scores for tutor {tutor.id}: {breakdown}")
    return breakdown
