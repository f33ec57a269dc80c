"""
Match Schemas

Output of the matching engine: one MatchResult per (tutor, criteria)
evaluation and the RankedTutor pairs produced by the ranker.
"""

from typing import Dict, Tuple
from pydantic import BaseModel, Field, ConfigDict

from tutormatch.constants import MAX_REASONS
from tutormatch.schemas.tutor import Tutor


class MatchResult(BaseModel):
    """
    Explainable match score.

    - score: weighted overall score, 3 decimals, in [0, 1]
    - reasons: at most three justifications, most significant first
    - breakdown: factor name -> factor score in [0, 1]
    """
    score: float = Field(..., ge=0, le=1, description="Overall match score")
    reasons: Tuple[str, ...] = Field(default=(), max_length=MAX_REASONS, description="Why this tutor matched")
    breakdown: Dict[str, float] = Field(default_factory=dict, description="Per-factor scores")

    model_config = ConfigDict(frozen=True)


class RankedTutor(BaseModel):
    """A tutor together with its match result."""
    tutor: Tutor
    match: MatchResult

    model_config = ConfigDict(frozen=True)
