"""
Weighted Aggregator

Combines the six factor scores into one overall score:

    score = sum(factor_score * weight), rounded half-up to 3 decimals

Weight distribution (must sum to 1.0):
    subject 0.30, availability 0.25, rating 0.20, price 0.15,
    language 0.07, verified 0.03
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Mapping, Union

from pydantic import BaseModel, Field, ConfigDict, model_validator

from tutormatch.constants import SCORE_DECIMALS
from tutormatch.algorithms.factor_scorers import Factor

logger = logging.getLogger(__name__)


class MatchWeights(BaseModel):
    """
    Factor weights. Construction fails unless the weights sum to exactly 1.0
    (compared in decimal, so 0.3 + 0.25 + ... is not subject to float drift).
    """
    subject: float = Field(0.30, ge=0, le=1)
    availability: float = Field(0.25, ge=0, le=1)
    rating: float = Field(0.20, ge=0, le=1)
    price: float = Field(0.15, ge=0, le=1)
    language: float = Field(0.07, ge=0, le=1)
    verified: float = Field(0.03, ge=0, le=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_total(self) -> "MatchWeights":
        total = sum(Decimal(str(weight)) for weight in self.as_dict().values())
        if total != Decimal("1"):
            raise ValueError(f"Match weights must sum to 1.0, got {total}")
        return self

    def weight_for(self, factor: Factor) -> float:
        return getattr(self, factor.value)

    def as_dict(self) -> Dict[str, float]:
        return {factor.value: getattr(self, factor.value) for factor in Factor}


DEFAULT_WEIGHTS = MatchWeights()

def round_half_up(value: Union[float, Decimal], places: int = SCORE_DECIMALS) -> float:
    """
    Round with ties going away from zero. Floats are taken at their shortest
    repr; pass a Decimal to round an exact value.

    Example:
        >>> round_half_up(0.1235)
        0.124
        >>> round(0.1235, 3)  # banker's/binary rounding differs
        0.123
    """
    exact = value if isinstance(value, Decimal) else Decimal(str(value))
    quantum = Decimal(1).scaleb(-places)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def aggregate(breakdown: Mapping[str, float], weights: MatchWeights = DEFAULT_WEIGHTS) -> float:
    """
    Weighted overall score in [0, 1].

    Products and the sum are taken in Decimal so a total like 0.2325 is
    rounded as 0.2325, not as the float just below it.

    Args:
        breakdown: Factor value -> factor score; a missing factor counts as 0
        weights: Factor weights

    Returns:
        Overall score rounded half-up to 3 decimals
    """
    total = Decimal(0)
    for factor in Factor:
        score = Decimal(str(breakdown.get(factor.value, 0.0)))
        total += score * Decimal(str(weights.weight_for(factor)))

    total = min(max(total, Decimal(0)), Decimal(1))
    return round_half_up(total)
