"""
Factor Scorer Tests

Tests for the six deterministic scorers in algorithms.factor_scorers.

Run: pytest tutormatch/tests/test_factor_scorers.py -v
"""

import pytest

from tutormatch.algorithms.availability import AvailabilityModel
from tutormatch.algorithms.factor_scorers import (
    Factor,
    parse_budget,
    score_availability,
    score_factors,
    score_language,
    score_price,
    score_rating,
    score_subject,
    score_verification,
)
from tutormatch.schemas.availability import AvailabilitySlot
from tutormatch.schemas.criteria import SearchCriteria
from tutormatch.schemas.tutor import SubjectOffering


# ==================== Subject ====================

def test_subject_exact_match_is_case_insensitive():
    subjects = [SubjectOffering(name="Math")]
    assert score_subject(subjects, "Math") == 1.0
    assert score_subject(subjects, "math") == 1.0
    assert score_subject([SubjectOffering(name="MATH")], "Math") == 1.0


def test_subject_partial_match_either_direction():
    assert score_subject([SubjectOffering(name="Mathematics")], "Math") == 0.7
    assert score_subject([SubjectOffering(name="Math")], "Mathematics") == 0.7


def test_subject_exact_beats_partial_anywhere_in_list():
    subjects = [SubjectOffering(name="Mathematics"), SubjectOffering(name="Math")]
    assert score_subject(subjects, "math") == 1.0


def test_subject_no_match():
    assert score_subject([SubjectOffering(name="Chemistry")], "History") == 0.0


def test_subject_missing_inputs_score_zero():
    """Absent subject is a non-match, not neutral."""
    assert score_subject([SubjectOffering(name="Math")], "") == 0.0
    assert score_subject([SubjectOffering(name="Math")], None) == 0.0
    assert score_subject([], "Math") == 0.0
    assert score_subject(None, "Math") == 0.0


def test_subject_accepts_plain_names():
    assert score_subject(["Physics", "Chemistry"], "physics") == 1.0


# ==================== Availability ====================

def test_availability_neutral_without_requirement():
    slots = [AvailabilitySlot(weekday=0, start_minutes=540, end_minutes=600)]
    assert score_availability(slots, None) == 0.5
    assert score_availability(slots, []) == 0.5


def test_availability_neutral_without_tutor_data():
    assert score_availability(None, [0, 1]) == 0.5
    assert score_availability([], [0, 1]) == 0.5


def test_availability_day_overlap():
    slots = [AvailabilitySlot(weekday=2, start_minutes=540, end_minutes=600)]
    assert score_availability(slots, [2, 4]) == 1.0
    assert score_availability(slots, [0, 1]) == 0.2


def test_availability_is_day_level_not_minute_level():
    """A requested slot at a different hour on the same day still counts."""
    tutor_slots = [AvailabilitySlot(weekday=3, start_minutes=480, end_minutes=540)]
    requested = [AvailabilitySlot(weekday=3, start_minutes=1200, end_minutes=1260)]
    assert score_availability(tutor_slots, requested) == 1.0


def test_availability_accepts_model():
    model = AvailabilityModel()
    model.toggle(6, 600)
    assert score_availability(model, [6]) == 1.0


# ==================== Rating ====================

@pytest.mark.parametrize("rating, expected", [
    (5.0, 1.0),
    (4.5, 0.9),
    (2.5, 0.5),
    (0.0, 0.0),
    (None, 0.0),
])
def test_rating_normalized(rating, expected):
    assert score_rating(rating) == pytest.approx(expected)


def test_rating_capped_at_one():
    assert score_rating(7.0) == 1.0


# ==================== Price ====================

def test_price_within_budget():
    assert score_price(30, "25-50") == 1.0
    assert score_price(25, "25-50") == 1.0
    assert score_price(50, "25-50") == 1.0


def test_price_below_budget():
    assert score_price(20, "25-50") == 0.8


def test_price_over_budget_linear_decay():
    assert score_price(55, "25-50") == pytest.approx(0.5)
    assert score_price(70, "25-50") == 0.0


def test_price_neutral_when_missing():
    assert score_price(None, "25-50") == 0.5
    assert score_price(0, "25-50") == 0.5
    assert score_price(30, None) == 0.5
    assert score_price(30, "") == 0.5


def test_price_malformed_budget_is_neutral():
    assert score_price(30, "cheap") == 0.5
    assert score_price(30, "-") == 0.5
    assert score_price(30, "50") == 0.5


def test_price_strips_non_digits():
    assert score_price(30, "$25 - $50") == 1.0
    assert score_price(20, "25USD-50USD") == 0.8


def test_price_open_ended_budget():
    assert score_price(500, "20-") == 1.0
    assert score_price(10, "20-") == 0.8
    assert score_price(10, "-20") == 1.0


def test_price_zero_ceiling_does_not_divide_by_zero():
    assert score_price(10, "0-0") == 0.0


def test_parse_budget():
    assert parse_budget("25-50") == (25, 50)
    assert parse_budget("$10-$100") == (10, 100)
    assert parse_budget("20-") == (20, None)
    assert parse_budget("-40") == (0, 40)
    assert parse_budget("abc-def") is None
    assert parse_budget(None) is None


# ==================== Language ====================

def test_language_scores():
    assert score_language(["en", "fr"], "fr") == 1.0
    assert score_language(["en", "fr"], "ar") == 0.3
    assert score_language(["EN"], "en") == 1.0


def test_language_neutral_when_missing():
    assert score_language(["en"], None) == 0.5
    assert score_language(["en"], "") == 0.5
    assert score_language([], "en") == 0.5
    assert score_language(None, "en") == 0.5


# ==================== Verification ====================

def test_verification():
    assert score_verification(True) == 1.0
    assert score_verification(False) == 0.0
    assert score_verification(None) == 0.0


# ==================== All factors ====================

def test_score_factors_covers_every_factor(make_tutor):
    tutor = make_tutor(verified=True)
    breakdown = score_factors(tutor, SearchCriteria())

    assert list(breakdown) == [factor.value for factor in Factor]
    assert all(0.0 <= value <= 1.0 for value in breakdown.values())


def test_score_factors_empty_criteria_uses_neutral_defaults(make_tutor):
    tutor = make_tutor(
        rating_avg=5.0,
        verified=True,
        availability=[{"weekday": 1, "start_minutes": 600, "end_minutes": 660}],
    )
    breakdown = score_factors(tutor, SearchCriteria())

    assert breakdown == {
        "subject": 0.0,
        "availability": 0.5,
        "rating": 1.0,
        "price": 0.5,
        "language": 0.5,
        "verified": 1.0,
    }
