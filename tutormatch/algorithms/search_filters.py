"""
Search Filters

Hard filters applied before ranking, and the alternative result orderings
offered next to "Best Match":

1. Drop tutors outside the price range, below the minimum rating, without a
   subject containing the search text, not speaking the language, or not
   verified when verified_only is set.
2. Rank the rest with the matching engine.
3. Re-order by rating or price if asked (stable over the relevance order).
"""

import logging
from typing import Any, Iterable, List, Optional

from tutormatch.algorithms.matching import Ranker
from tutormatch.schemas.criteria import SearchFilters, SortOption
from tutormatch.schemas.match import RankedTutor
from tutormatch.schemas.tutor import Tutor

logger = logging.getLogger(__name__)


def passes_filters(tutor: Tutor, filters: SearchFilters) -> bool:
    """True if the tutor survives every hard filter."""
    price = tutor.price_per_hour
    if filters.min_price is not None and (price is None or price < filters.min_price):
        return False
    if filters.max_price is not None and (price is None or price > filters.max_price):
        return False

    if filters.min_rating > 0 and tutor.rating_avg < filters.min_rating:
        return False

    if filters.subject and filters.subject.strip():
        wanted = filters.subject.strip().lower()
        if not any(wanted in subject.name.lower() for subject in tutor.subjects):
            return False

    if filters.language and filters.language.strip():
        wanted = filters.language.strip().lower()
        if wanted not in {code.strip().lower() for code in tutor.languages}:
            return False

    if filters.verified_only and not tutor.verified:
        return False

    return True


def apply_filters(tutors: Iterable[Tutor], filters: SearchFilters) -> List[Tutor]:
    return [tutor for tutor in tutors if passes_filters(tutor, filters)]


def sort_results(ranked: List[RankedTutor], sort: SortOption) -> List[RankedTutor]:
    """
    Re-order ranked results. Python's sort is stable, so ties keep the
    relevance order. Tutors without a price go last for both price orders.
    """
    if sort == SortOption.RATING:
        return sorted(ranked, key=lambda r: -r.tutor.rating_avg)
    if sort == SortOption.PRICE_LOW:
        return sorted(ranked, key=lambda r: (r.tutor.price_per_hour is None, r.tutor.price_per_hour or 0))
    if sort == SortOption.PRICE_HIGH:
        return sorted(ranked, key=lambda r: (r.tutor.price_per_hour is None, -(r.tutor.price_per_hour or 0)))
    return list(ranked)


def search_tutors(
    tutors: Iterable[Any],
    filters: SearchFilters,
    ranker: Optional[Ranker] = None,
    limit: Optional[int] = None
) -> List[RankedTutor]:
    """
    Filter, rank and sort tutors for a search request.

    Args:
        tutors: Candidate snapshots (Tutor or dicts)
        filters: Search request
        ranker: Ranker to use (default weights if omitted)
        limit: Keep at most this many results

    Returns:
        Ranked results in the requested order
    """
    ranker = ranker or Ranker()
    candidates = [t if isinstance(t, Tutor) else Tutor.model_validate(t) for t in tutors]
    matching = apply_filters(candidates, filters)

    logger.info(f"Search filters kept {len(matching)}/{len(candidates)} tutors")

    ranked = ranker.rank(matching, filters.to_criteria())
    ordered = sort_results(ranked, filters.sort)

    if limit is not None:
        ordered = ordered[:limit]
    return ordered
