"""
Tutor Schemas

Read-only tutor snapshot as handed over by the tutor store client.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

from tutormatch.schemas.availability import AvailabilitySlot


class SubjectOffering(BaseModel):
    """A subject a tutor teaches, optionally at a level and with its own price."""
    name: str = Field(..., min_length=1, description="Subject name")
    level: Optional[str] = Field(None, description="Level (High School, University, ...)")
    price_override: Optional[float] = Field(None, gt=0, description="Hourly price for this subject")

    model_config = ConfigDict(frozen=True)


class Tutor(BaseModel):
    """
    Tutor snapshot.

    Only the fields read by the matching engine are declared; anything else the
    store returns is carried along untouched.
    """
    id: str = Field(..., description="Tutor identifier")
    name: Optional[str] = Field(None, description="Display name")
    price_per_hour: Optional[float] = Field(None, gt=0, description="Hourly price")
    rating_avg: float = Field(0.0, ge=0, le=5, description="Average review rating")
    rating_count: int = Field(0, ge=0, description="Number of reviews")
    languages: List[str] = Field(default_factory=list, description="Language codes spoken")
    verified: bool = Field(False, description="Identity/credentials verified")
    subjects: List[SubjectOffering] = Field(default_factory=list, description="Subjects taught, in display order")
    availability: List[AvailabilitySlot] = Field(default_factory=list, description="Weekly free slots")

    model_config = ConfigDict(frozen=True, extra="allow")

    def schedule(self):
        """The tutor's weekly availability as an AvailabilityModel."""
        from tutormatch.algorithms.availability import AvailabilityModel
        return AvailabilityModel(self.availability)
