"""
Algorithms Package

Deterministic matching and availability algorithms:
- factor_scorers: the six per-factor scorers and the Factor enum
- aggregator: validated weights and the weighted overall score
- reasons: human-readable match reasons
- matching: MatchEngine and Ranker
- search_filters: pre-ranking filters and result orderings
- availability: weekly AvailabilityModel with toggle semantics
- availability_editor: grid editor and read-only booking view

All algorithms are pure (no I/O, no randomness).
"""

from tutormatch.algorithms.factor_scorers import Factor, score_factors
from tutormatch.algorithms.aggregator import MatchWeights, DEFAULT_WEIGHTS, aggregate
from tutormatch.algorithms.reasons import generate_reasons
from tutormatch.algorithms.matching import MatchEngine, Ranker, calculate_tutor_match, rank_tutors
from tutormatch.algorithms.search_filters import search_tutors
from tutormatch.algorithms.availability import AvailabilityModel, SlotState
from tutormatch.algorithms.availability_editor import AvailabilityEditor, BookingSelectionView

__all__ = [
    "Factor",
    "score_factors",
    "MatchWeights",
    "DEFAULT_WEIGHTS",
    "aggregate",
    "generate_reasons",
    "MatchEngine",
    "Ranker",
    "calculate_tutor_match",
    "rank_tutors",
    "search_tutors",
    "AvailabilityModel",
    "SlotState",
    "AvailabilityEditor",
    "BookingSelectionView",
]
