"""
Pydantic Schemas Package

Typed models for the tutor matching service.

Export Groups:
- Base: Proofs, ApiResponse
- Availability: AvailabilitySlot
- Tutor: SubjectOffering, Tutor
- Criteria: SearchCriteria, SearchFilters, SortOption
- Match: MatchResult, RankedTutor
"""

from tutormatch.schemas.base import Proofs, ApiResponse
from tutormatch.schemas.availability import AvailabilitySlot
from tutormatch.schemas.tutor import SubjectOffering, Tutor
from tutormatch.schemas.criteria import SearchCriteria, SearchFilters, SortOption
from tutormatch.schemas.match import MatchResult, RankedTutor

__all__ = [
    "Proofs",
    "ApiResponse",
    "AvailabilitySlot",
    "SubjectOffering",
    "Tutor",
    "SearchCriteria",
    "SearchFilters",
    "SortOption",
    "MatchResult",
    "RankedTutor",
]
