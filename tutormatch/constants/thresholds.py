"""
Threshold Constants

Centralized score values and thresholds used by the factor scorers and the
reason generator.

IMPORTANT: These values MUST stay in sync with algorithm implementations.
SYNC comments name the module that reads each group.
"""

# ============================================================================
# Factor Scores
# SYNC WITH: tutormatch/algorithms/factor_scorers.py
# ============================================================================

# Score used whenever a factor has no preference or no data to compare
NEUTRAL_SCORE = 0.5

# Subject: a name contained in the other (either direction)
SUBJECT_PARTIAL_SCORE = 0.7

# Availability: requested weekdays given but none of the tutor's slots fall on them
AVAILABILITY_MISS_SCORE = 0.2

# Rating scale ceiling
MAX_RATING = 5.0

# Price: tutor cheaper than the budget floor
PRICE_BELOW_BUDGET_SCORE = 0.8

# Price: decay band above the budget ceiling, as a fraction of the ceiling
PRICE_OVER_BUDGET_TOLERANCE = 0.2

# Language: target language given but not spoken
LANGUAGE_MISS_SCORE = 0.3


# ============================================================================
# Reason Thresholds
# SYNC WITH: tutormatch/algorithms/reasons.py
# ============================================================================

PERFECT_SUBJECT_THRESHOLD = 0.9
GOOD_SUBJECT_THRESHOLD = 0.5
HIGH_RATING_THRESHOLD = 0.9
WITHIN_BUDGET_THRESHOLD = 0.8
AVAILABLE_THRESHOLD = 0.8

MAX_REASONS = 3

# Decimal places kept on the overall score
SCORE_DECIMALS = 3


# ============================================================================
# Helper Functions
# ============================================================================

def clamp_score(value: float) -> float:
    """
    Clamp a factor or overall score to [0, 1].

    Example:
        >>> clamp_score(1.4)
        1.0
        >>> clamp_score(-0.2)
        0.0
    """
    return max(0.0, min(1.0, float(value)))
