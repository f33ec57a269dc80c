"""
Tutor Matching Service

Ranks tutors against a student's search criteria with an explainable,
deterministic multi-factor score, and edits tutors' weekly availability.

Usage:
    from tutormatch import rank_tutors, SearchCriteria

    ranked = rank_tutors(tutors, SearchCriteria(subject="Math", budget="25-50"))
    for item in ranked:
        print(item.tutor.id, item.match.score, item.match.reasons)
"""

from tutormatch.algorithms.matching import MatchEngine, Ranker, calculate_tutor_match, rank_tutors
from tutormatch.algorithms.availability import AvailabilityModel
from tutormatch.schemas import SearchCriteria, Tutor, MatchResult, AvailabilitySlot

__all__ = [
    "MatchEngine",
    "Ranker",
    "calculate_tutor_match",
    "rank_tutors",
    "AvailabilityModel",
    "SearchCriteria",
    "Tutor",
    "MatchResult",
    "AvailabilitySlot",
]
__version__ = "1.0.0"
