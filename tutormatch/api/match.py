"""
Matching API Endpoints

Pure computation over tutor snapshots supplied in the request body.

Endpoints:
- POST /match/evaluate - Score one tutor against search criteria
- POST /match/rank - Rank a list of tutors against search criteria
"""

import logging
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from tutormatch.algorithms.aggregator import DEFAULT_WEIGHTS
from tutormatch.algorithms.matching import MatchEngine, Ranker
from tutormatch.api.common import standard_response
from tutormatch.constants import ALGORITHM_MATCHING
from tutormatch.schemas.criteria import SearchCriteria
from tutormatch.schemas.tutor import Tutor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/match", tags=["matching"])

_engine = MatchEngine()
_ranker = Ranker(_engine)

# ============================================================================
# Schemas
# ============================================================================


class EvaluateRequest(BaseModel):
    """Request body for scoring a single tutor."""
    tutor: Tutor
    criteria: SearchCriteria = Field(default_factory=SearchCriteria)


class RankRequest(BaseModel):
    """Request body for ranking tutors."""
    tutors: List[Tutor] = Field(..., description="Candidate tutor snapshots, in display order")
    criteria: SearchCriteria = Field(default_factory=SearchCriteria)


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/evaluate")
async def evaluate_tutor(body: EvaluateRequest):
    """Match score, reasons and factor breakdown for one tutor."""
    result = _engine.evaluate(body.tutor, body.criteria)
    return standard_response(
        message=f"Tutor {body.tutor.id} matches at {result.score:.3f}",
        data={"tutor_id": body.tutor.id, "match": result.model_dump()},
        algorithm=ALGORITHM_MATCHING,
        sources=["request"]
    )


@router.post("/rank")
async def rank(body: RankRequest):
    """Tutors ordered by match score, highest first; ties keep request order."""
    ranked = _ranker.rank(body.tutors, body.criteria)
    return standard_response(
        message=f"Ranked {len(ranked)} tutors",
        data={
            "results": [item.model_dump() for item in ranked],
            "total": len(ranked),
            "weights": DEFAULT_WEIGHTS.as_dict(),
        },
        algorithm=ALGORITHM_MATCHING,
        sources=["request"]
    )
