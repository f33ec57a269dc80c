"""
Matching Tests

Tests for weights, aggregation, reason generation, MatchEngine and Ranker.

Run: pytest tutormatch/tests/test_matching.py -v
"""

import pytest
from decimal import Decimal


# ==================== Weights ====================

def test_default_weights_sum_to_exactly_one():
    from tutormatch.algorithms.aggregator import DEFAULT_WEIGHTS

    total = sum(Decimal(str(w)) for w in DEFAULT_WEIGHTS.as_dict().values())
    assert total == Decimal("1")
    assert DEFAULT_WEIGHTS.as_dict() == {
        "subject": 0.30,
        "availability": 0.25,
        "rating": 0.20,
        "price": 0.15,
        "language": 0.07,
        "verified": 0.03,
    }


def test_weights_not_summing_to_one_are_rejected():
    from pydantic import ValidationError as PydanticValidationError
    from tutormatch.algorithms.aggregator import MatchWeights

    with pytest.raises(PydanticValidationError):
        MatchWeights(subject=0.5)


def test_custom_weights_accepted_when_they_sum_to_one():
    from tutormatch.algorithms.aggregator import MatchWeights

    weights = MatchWeights(
        subject=0.5, availability=0.1, rating=0.1, price=0.1, language=0.1, verified=0.1
    )
    assert weights.subject == 0.5


def test_weights_reject_unknown_factor():
    from pydantic import ValidationError as PydanticValidationError
    from tutormatch.algorithms.aggregator import MatchWeights

    with pytest.raises(PydanticValidationError):
        MatchWeights(popularity=0.1)


# ==================== Aggregation ====================

def test_round_half_up():
    from tutormatch.algorithms.aggregator import round_half_up

    assert round_half_up(0.1235) == 0.124
    assert round_half_up(0.1234) == 0.123
    assert round_half_up(0.9995) == 1.0


@pytest.mark.parametrize("breakdown, expected", [
    ({"availability": 0.2, "price": 0.75, "language": 1.0}, 0.233),
    ({"availability": 0.5, "price": 0.75}, 0.238),
    ({"subject": 0.7, "price": 0.05}, 0.218),
    ({"price": 0.45}, 0.068),
])
def test_aggregate_rounds_exact_half_up(breakdown, expected):
    """Totals ending in 5 at the fourth decimal round up, not down via float error."""
    from tutormatch.algorithms.aggregator import aggregate

    assert aggregate(breakdown) == expected


def test_aggregate_all_ones_is_one():
    from tutormatch.algorithms.aggregator import aggregate

    breakdown = {name: 1.0 for name in
                 ("subject", "availability", "rating", "price", "language", "verified")}
    assert aggregate(breakdown) == 1.0


def test_aggregate_missing_factor_counts_as_zero():
    from tutormatch.algorithms.aggregator import aggregate

    assert aggregate({"subject": 1.0}) == 0.3
    assert aggregate({}) == 0.0


# ==================== Reasons ====================

def test_reasons_priority_order_and_cap():
    from tutormatch.algorithms.reasons import generate_reasons

    reasons = generate_reasons({
        "subject": 1.0,
        "availability": 1.0,
        "rating": 1.0,
        "price": 1.0,
        "language": 1.0,
        "verified": 1.0,
    })
    assert reasons == ["Perfect subject match", "Highly rated tutor", "Within your budget"]


def test_reasons_good_subject_and_lower_priority_entries():
    from tutormatch.algorithms.reasons import generate_reasons

    reasons = generate_reasons({
        "subject": 0.7,
        "availability": 1.0,
        "rating": 0.5,
        "price": 0.5,
        "language": 0.3,
        "verified": 1.0,
    })
    assert reasons == ["Good subject match", "Available when you need", "Verified tutor"]


def test_reasons_empty_when_nothing_stands_out():
    from tutormatch.algorithms.reasons import generate_reasons

    assert generate_reasons({"subject": 0.0, "rating": 0.5, "price": 0.5}) == []


# ==================== MatchEngine ====================

def test_evaluate_perfect_fit(make_tutor):
    from tutormatch.algorithms.matching import MatchEngine
    from tutormatch.schemas.criteria import SearchCriteria

    tutor = make_tutor(
        rating_avg=5.0,
        verified=True,
        subjects=[{"name": "Math"}],
        availability=[{"weekday": 0, "start_minutes": 540, "end_minutes": 600}],
    )
    criteria = SearchCriteria(subject="Math", budget="25-50", language="en", availability=[0])

    result = MatchEngine().evaluate(tutor, criteria)

    assert result.score == 1.0
    assert result.reasons == ("Perfect subject match", "Highly rated tutor", "Within your budget")
    assert set(result.breakdown.values()) == {1.0}


def test_evaluate_without_criteria_degrades_to_neutral(make_tutor):
    from tutormatch.algorithms.matching import MatchEngine

    result = MatchEngine().evaluate(make_tutor())

    # 0.25 * 0.5 + 0.20 * 0.8 + 0.15 * 0.5 + 0.07 * 0.5
    assert result.score == 0.395
    assert result.reasons == ()
    assert result.breakdown["subject"] == 0.0
    assert result.breakdown["availability"] == 0.5


def test_evaluate_score_rounds_half_up(make_tutor):
    from tutormatch.algorithms.matching import MatchEngine
    from tutormatch.schemas.criteria import SearchCriteria

    tutor = make_tutor(
        price_per_hour=42.0,
        rating_avg=0.0,
        languages=["en"],
        subjects=[{"name": "Art"}],
        availability=[{"weekday": 5, "start_minutes": 540, "end_minutes": 600}],
    )
    criteria = SearchCriteria(subject="Math", budget="25-40", language="en", availability=[0])

    result = MatchEngine().evaluate(tutor, criteria)

    assert result.breakdown == {
        "subject": 0.0,
        "availability": 0.2,
        "rating": 0.0,
        "price": 0.75,
        "language": 1.0,
        "verified": 0.0,
    }
    # 0.25 * 0.2 + 0.15 * 0.75 + 0.07 * 1.0 = 0.2325
    assert result.score == 0.233


def test_evaluate_accepts_plain_dicts():
    from tutormatch.algorithms.matching import calculate_tutor_match

    result = calculate_tutor_match(
        {"id": "d1", "name": "Dict Tutor", "price_per_hour": 30, "rating_avg": 4.5,
         "languages": ["en"], "verified": True, "subjects": [{"name": "Physics"}]},
        {"subject": "physics", "language": "en"},
    )

    assert 0.0 <= result.score <= 1.0
    assert result.reasons[0] == "Perfect subject match"


def test_match_result_is_immutable(make_tutor):
    from pydantic import ValidationError as PydanticValidationError
    from tutormatch.algorithms.matching import calculate_tutor_match

    result = calculate_tutor_match(make_tutor())
    with pytest.raises(PydanticValidationError):
        result.score = 0.0


def test_evaluate_with_custom_weights(make_tutor):
    from tutormatch.algorithms.aggregator import MatchWeights
    from tutormatch.algorithms.matching import MatchEngine

    verified_only = MatchWeights(
        subject=0, availability=0, rating=0, price=0, language=0, verified=1
    )
    engine = MatchEngine(verified_only)

    assert engine.evaluate(make_tutor(verified=True)).score == 1.0
    assert engine.evaluate(make_tutor(verified=False)).score == 0.0


def test_scores_and_reasons_bounded_over_pool(tutor_pool):
    from tutormatch.algorithms.matching import calculate_tutor_match

    for criteria in ({}, {"subject": "Physics"}, {"budget": "nonsense", "language": "xx"}):
        for tutor in tutor_pool:
            result = calculate_tutor_match(tutor, criteria)
            assert 0.0 <= result.score <= 1.0
            assert len(result.reasons) <= 3
            assert all(0.0 <= v <= 1.0 for v in result.breakdown.values())


# ==================== Ranker ====================

def test_rank_orders_by_score_descending(tutor_pool):
    from tutormatch.algorithms.matching import rank_tutors
    from tutormatch.schemas.criteria import SearchCriteria

    criteria = SearchCriteria(subject="Physics", budget="25-50", language="en", availability=[0])
    ranked = rank_tutors(tutor_pool, criteria)

    assert [r.tutor.id for r in ranked] == ["physics-pro", "applied-physics", "math-only"]
    scores = [r.match.score for r in ranked]
    assert scores == sorted(scores, reverse=True)


def test_rank_ties_keep_input_order(make_tutor):
    from tutormatch.algorithms.matching import Ranker

    a = make_tutor("A", rating_avg=4.0)
    b = make_tutor("B", rating_avg=2.0)
    c = make_tutor("C", rating_avg=4.0)

    ranked = Ranker().rank([a, b, c])
    assert [r.tutor.id for r in ranked] == ["A", "C", "B"]

    ranked = Ranker().rank([c, b, a])
    assert [r.tutor.id for r in ranked] == ["C", "A", "B"]


def test_rank_is_deterministic(tutor_pool):
    from tutormatch.algorithms.matching import rank_tutors

    first = rank_tutors(tutor_pool, {"subject": "physics"})
    second = rank_tutors(tutor_pool, {"subject": "physics"})
    assert [r.model_dump() for r in first] == [r.model_dump() for r in second]


def test_rank_empty_input():
    from tutormatch.algorithms.matching import rank_tutors

    assert rank_tutors([], {"subject": "Math"}) == []
