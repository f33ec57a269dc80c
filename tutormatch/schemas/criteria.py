"""
Search Criteria Schemas

SearchCriteria is what the matching engine scores against. SearchFilters is
what the search endpoint accepts: hard filters plus the fields that become
SearchCriteria.
"""

import math
from enum import Enum
from typing import Annotated, FrozenSet, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

from tutormatch.schemas.availability import AvailabilitySlot

Weekday = Annotated[int, Field(ge=0, le=6)]


class SearchCriteria(BaseModel):
    """
    A student's preferences. Every field is optional; None means "no
    preference" and scores neutrally.

    budget: "<min>-<max>" hourly price range, e.g. "25-50"
    availability: weekday indices (0 = Monday) or explicit weekly slots
    """
    subject: Optional[str] = Field(None, description="Subject free text")
    budget: Optional[str] = Field(None, description="Budget range 'min-max'")
    language: Optional[str] = Field(None, description="Target language code")
    availability: Optional[List[Union[Weekday, AvailabilitySlot]]] = Field(
        None, description="Requested weekdays or weekly slots"
    )

    model_config = ConfigDict(frozen=True)

    def requested_weekdays(self) -> Optional[FrozenSet[int]]:
        """Weekday set of the availability requirement, None when there is none."""
        if not self.availability:
            return None
        return frozenset(
            item.weekday if isinstance(item, AvailabilitySlot) else item
            for item in self.availability
        )


class SortOption(str, Enum):
    """Result orderings offered by the search page."""
    RELEVANCE = "relevance"
    RATING = "rating"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"


class SearchFilters(BaseModel):
    """
    Search request.

    Hard filters (price range, minimum rating, subject, language, verified_only)
    drop tutors before ranking; subject, price range, language and weekdays are
    also turned into the SearchCriteria used for scoring.
    """
    subject: Optional[str] = Field(None, description="Subject free text")
    level: Optional[str] = Field(None, description="Subject level (informational)")
    min_price: Optional[float] = Field(None, ge=0, description="Lowest hourly price")
    max_price: Optional[float] = Field(None, ge=0, description="Highest hourly price")
    language: Optional[str] = Field(None, description="Language code")
    min_rating: float = Field(0.0, ge=0, le=5, description="Minimum average rating, 0 = any")
    verified_only: bool = Field(False, description="Only verified tutors")
    weekdays: Optional[List[Weekday]] = Field(None, description="Weekdays the student is free")
    sort: SortOption = Field(SortOption.RELEVANCE, description="Result ordering")

    model_config = ConfigDict(frozen=True)

    def budget(self) -> Optional[str]:
        """
        Price range as a budget string; an open upper end is left empty ("20-").

        Budgets are whole numbers, so the range is widened outwards (floor of the
        minimum, ceiling of the maximum) and every tutor the price filter keeps
        also scores as within budget.
        """
        if self.min_price is None and self.max_price is None:
            return None
        low = math.floor(self.min_price or 0)
        high = "" if self.max_price is None else str(math.ceil(self.max_price))
        return f"{low}-{high}"

    def to_criteria(self) -> SearchCriteria:
        return SearchCriteria(
            subject=self.subject or None,
            budget=self.budget(),
            language=self.language or None,
            availability=list(self.weekdays) if self.weekdays else None,
        )
