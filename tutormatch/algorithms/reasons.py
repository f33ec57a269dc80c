"""
Match Reasons

Turns a factor breakdown into at most three human-readable reasons, checked in
a fixed priority order: subject, rating, price, availability, verification.
"""

from typing import List, Mapping

from tutormatch.constants import (
    PERFECT_SUBJECT_THRESHOLD,
    GOOD_SUBJECT_THRESHOLD,
    HIGH_RATING_THRESHOLD,
    WITHIN_BUDGET_THRESHOLD,
    AVAILABLE_THRESHOLD,
    MAX_REASONS,
)
from tutormatch.algorithms.factor_scorers import Factor

REASON_PERFECT_SUBJECT = "Perfect subject match"
REASON_GOOD_SUBJECT = "Good subject match"
REASON_HIGH_RATING = "Highly rated tutor"
REASON_WITHIN_BUDGET = "Within your budget"
REASON_AVAILABLE = "Available when you need"
REASON_VERIFIED = "Verified tutor"


def generate_reasons(breakdown: Mapping[str, float]) -> List[str]:
    """
    Reasons for a match, most significant first, capped at three.

    Args:
        breakdown: Factor value -> factor score; missing factors count as 0
    """
    reasons = []

    subject = breakdown.get(Factor.SUBJECT.value, 0.0)
    if subject >= PERFECT_SUBJECT_THRESHOLD:
        reasons.append(REASON_PERFECT_SUBJECT)
    elif subject >= GOOD_SUBJECT_THRESHOLD:
        reasons.append(REASON_GOOD_SUBJECT)

    if breakdown.get(Factor.RATING.value, 0.0) >= HIGH_RATING_THRESHOLD:
        reasons.append(REASON_HIGH_RATING)

    if breakdown.get(Factor.PRICE.value, 0.0) >= WITHIN_BUDGET_THRESHOLD:
        reasons.append(REASON_WITHIN_BUDGET)

    if breakdown.get(Factor.AVAILABILITY.value, 0.0) >= AVAILABLE_THRESHOLD:
        reasons.append(REASON_AVAILABLE)

    if breakdown.get(Factor.VERIFIED.value, 0.0) == 1:
        reasons.append(REASON_VERIFIED)

    return reasons[:MAX_REASONS]
