"""
Availability Schemas

A weekly recurring free interval of a tutor. Slots are immutable values; the
editable collection is tutormatch.algorithms.availability.AvailabilityModel.
"""

from pydantic import BaseModel, Field, ConfigDict, model_validator

from tutormatch.constants import MINUTES_PER_DAY, weekday_name


class AvailabilitySlot(BaseModel):
    """
    One weekly interval [start_minutes, end_minutes) on a weekday.

    weekday: 0 = Monday .. 6 = Sunday
    start_minutes / end_minutes: minutes since midnight, end > start
    """
    weekday: int = Field(..., ge=0, le=6, description="Weekday index (0 = Monday)")
    start_minutes: int = Field(..., ge=0, lt=MINUTES_PER_DAY, description="Start, minutes since midnight")
    end_minutes: int = Field(..., gt=0, le=MINUTES_PER_DAY, description="End (exclusive), minutes since midnight")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> "AvailabilitySlot":
        if self.end_minutes <= self.start_minutes:
            raise ValueError("end_minutes must be greater than start_minutes")
        return self

    @property
    def day(self) -> str:
        return weekday_name(self.weekday)

    def covers(self, weekday: int, minute: int) -> bool:
        """True if (weekday, minute) falls inside this slot."""
        return self.weekday == weekday and self.start_minutes <= minute < self.end_minutes

    def overlaps(self, weekday: int, start: int, end: int) -> bool:
        """True if [start, end) on weekday shares at least one minute with this slot."""
        return self.weekday == weekday and start < self.end_minutes and self.start_minutes < end
