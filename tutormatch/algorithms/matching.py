"""
Tutor Matching Engine

Deterministic matching of tutors against a student's search criteria.
Produces an explainable MatchResult per tutor and a stable, score-descending
ranking over a candidate list.

Pipeline: factor scorers -> weighted aggregator + reason generator -> MatchResult.
"""

import logging
from typing import Any, Iterable, List, Optional

from tutormatch.algorithms.aggregator import DEFAULT_WEIGHTS, MatchWeights, aggregate
from tutormatch.algorithms.factor_scorers import score_factors
from tutormatch.algorithms.reasons import generate_reasons
from tutormatch.schemas.criteria import SearchCriteria
from tutormatch.schemas.match import MatchResult, RankedTutor
from tutormatch.schemas.tutor import Tutor

logger = logging.getLogger(__name__)


def _as_tutor(tutor: Any) -> Tutor:
    return tutor if isinstance(tutor, Tutor) else Tutor.model_validate(tutor)


def _as_criteria(criteria: Any) -> SearchCriteria:
    if criteria is None:
        return SearchCriteria()
    return criteria if isinstance(criteria, SearchCriteria) else SearchCriteria.model_validate(criteria)


class MatchEngine:
    """
    Scores one tutor against one set of criteria.

    Args:
        weights: Factor weights, validated to sum to 1.0
    """

    def __init__(self, weights: MatchWeights = DEFAULT_WEIGHTS):
        self.weights = weights

    def evaluate(self, tutor: Any, criteria: Any = None) -> MatchResult:
        """
        Evaluate a tutor.

        Missing criteria fields fall back to each factor's neutral default;
        this never raises for absent preferences.
        """
        tutor = _as_tutor(tutor)
        criteria = _as_criteria(criteria)

        breakdown = score_factors(tutor, criteria)
        score = aggregate(breakdown, self.weights)
        reasons = generate_reasons(breakdown)

        logger.debug(f"Tutor {tutor.id}: score={score} reasons={reasons}")
        return MatchResult(score=score, reasons=tuple(reasons), breakdown=breakdown)


class Ranker:
    """
    Ranks candidates by match score, highest first.

    Equal scores keep their input order: the sort key carries the input
    position, so the ordering does not depend on sort stability.
    """

    def __init__(self, engine: Optional[MatchEngine] = None):
        self.engine = engine or MatchEngine()

    def rank(self, tutors: Iterable[Any], criteria: Any = None) -> List[RankedTutor]:
        criteria = _as_criteria(criteria)

        scored = []
        for position, tutor in enumerate(tutors):
            tutor = _as_tutor(tutor)
            scored.append((position, RankedTutor(tutor=tutor, match=self.engine.evaluate(tutor, criteria))))

        scored.sort(key=lambda item: (-item[1].match.score, item[0]))
        ranked = [item[1] for item in scored]

        if ranked:
            top = ranked[0]
            logger.info(f"Ranked {len(ranked)} tutors, top {top.tutor.id} at {top.match.score}")
        else:
            logger.info("Ranked 0 tutors")

        return ranked


# ============================================================================
# Module-level helpers
# ============================================================================

_default_ranker = Ranker()


def calculate_tutor_match(tutor: Any, criteria: Any = None) -> MatchResult:
    """Evaluate one tutor with the default weights."""
    return _default_ranker.engine.evaluate(tutor, criteria)


def rank_tutors(tutors: Iterable[Any], criteria: Any = None) -> List[RankedTutor]:
    """Rank tutors with the default weights."""
    return _default_ranker.rank(tutors, criteria)
