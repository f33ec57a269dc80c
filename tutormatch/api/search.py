"""
Search API Endpoints

Endpoints:
- POST /tutors/search - Filter, rank and sort tutors from the tutor store
"""

import logging

from fastapi import APIRouter

from tutormatch.algorithms.search_filters import search_tutors
from tutormatch.api.common import standard_response, store_request_id
from tutormatch.constants import ALGORITHM_MATCHING
from tutormatch.core.config import settings
from tutormatch.schemas.criteria import SearchFilters
from tutormatch.tools import tutor_store_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tutors", tags=["search"])


@router.post("/search")
async def search(filters: SearchFilters):
    """
    Search tutors.

    Loads tutor snapshots from the store (verified ones only when
    verified_only is set), drops tutors failing the hard filters, ranks the
    rest and applies the requested sort.
    """
    tutors = await tutor_store_client.load_tutor_snapshots(
        verified=True if filters.verified_only else None,
        request_id=store_request_id()
    )

    results = search_tutors(tutors, filters, limit=settings.SEARCH_RESULT_LIMIT)

    if filters.subject:
        message = f"Found {len(results)} tutors for \"{filters.subject}\""
    else:
        message = f"Found {len(results)} tutors"

    return standard_response(
        message=message,
        data={
            "results": [item.model_dump() for item in results],
            "total_candidates": len(tutors),
            "total_results": len(results),
            "sort": filters.sort.value,
            "criteria": filters.to_criteria().model_dump(),
        },
        algorithm=ALGORITHM_MATCHING,
        sources=["tutor_store"]
    )
