"""
Weekly Availability Model

A tutor's free time as a collection of disjoint weekly slots, with the
containment, overlap and toggle operations used by the ranking pass, the
tutor-facing editor and the booking view.

Toggle works on whole slots: a click inside an existing slot removes that slot,
a click on a free cell adds a one-hour slot starting at the clicked minute,
shortened if it would run into the next slot.There is no merging of neighbours and no splitting of longer slots.

No I/O and no validation of the caller's (weekday, minute) against the editor
grid - that happens at the call boundary (see availability_editor). The one
check made here is that an initial slot list is disjoint.
"""

import logging
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional

from tutormatch.constants import GRID_SLOT_MINUTES, MINUTES_PER_DAY
from tutormatch.core.errors import ValidationError
from tutormatch.schemas.availability import AvailabilitySlot

logger = logging.getLogger(__name__)


class SlotState(str, Enum):
    """State of one editor cell. toggle() is the only transition."""
    UNAVAILABLE = "unavailable"
    AVAILABLE = "available"


def _coerce_slot(slot: Any) -> AvailabilitySlot:
    if isinstance(slot, AvailabilitySlot):
        return slot
    return AvailabilitySlot.model_validate(slot)


class AvailabilityModel:
    """
    Mutable set of weekly slots.

    Args:
        slots: Initial slots (AvailabilitySlot or dicts), e.g. a tutor's
            persisted weekly schedule. Empty means every cell is unavailable.
    """

    def __init__(self, slots: Optional[Iterable[Any]] = None):
        self._slots: List[AvailabilitySlot] = [_coerce_slot(s) for s in (slots or [])]
        if not self.is_disjoint():
            raise ValidationError(
                "Weekly slots must not overlap",
                details={"slots": [slot.model_dump() for slot in self.slots]}
            )

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[AvailabilitySlot]:
        return iter(self.slots)

    def __repr__(self) -> str:
        return f"AvailabilityModel({len(self._slots)} slots)"

    @property
    def slots(self) -> List[AvailabilitySlot]:
        """Current slots ordered by weekday then start."""
        return sorted(self._slots, key=lambda s: (s.weekday, s.start_minutes))

    # ==================== Queries ====================

    def find(self, weekday: int, minute: int) -> Optional[AvailabilitySlot]:
        """The slot covering (weekday, minute), if any."""
        for slot in self._slots:
            if slot.covers(weekday, minute):
                return slot
        return None

    def is_available(self, weekday: int, minute: int) -> bool:
        return self.find(weekday, minute) is not None

    def state(self, weekday: int, minute: int) -> SlotState:
        return SlotState.AVAILABLE if self.is_available(weekday, minute) else SlotState.UNAVAILABLE

    def overlaps(self, weekday: int, start: int, end: int) -> bool:
        """Minute-level check: does [start, end) on weekday touch any free slot."""
        return any(slot.overlaps(weekday, start, end) for slot in self._slots)

    def weekdays(self) -> FrozenSet[int]:
        """Weekdays with at least one slot."""
        return frozenset(slot.weekday for slot in self._slots)

    def is_disjoint(self) -> bool:
        """True if no two slots on the same weekday share a minute."""
        ordered = self.slots
        for previous, current in zip(ordered, ordered[1:]):
            if previous.weekday == current.weekday and current.start_minutes < previous.end_minutes:
                return False
        return True

    # ==================== Editing ====================

    def toggle(self, weekday: int, minute: int) -> SlotState:
        """
        Flip the cell at (weekday, minute).

        Removes the whole covering slot if there is one, otherwise adds
        [minute, minute + 60), cut short at the start of the next slot that day
        so slots stay disjoint. Returns the cell's new state.
        """
        existing = self.find(weekday, minute)
        if existing is not None:
            self._slots.remove(existing)
            logger.debug(
                f"Removed slot day={existing.weekday} "
                f"[{existing.start_minutes}, {existing.end_minutes})"
            )
            return SlotState.UNAVAILABLE

        end = min(minute + GRID_SLOT_MINUTES, MINUTES_PER_DAY)
        for other in self._slots:
            if other.overlaps(weekday, minute, end):
                end = min(end, other.start_minutes)

        slot = AvailabilitySlot(weekday=weekday, start_minutes=minute, end_minutes=end)
        self._slots.append(slot)
        logger.debug(f"Added slot day={weekday} [{slot.start_minutes}, {slot.end_minutes})")
        return SlotState.AVAILABLE

    def clear(self) -> None:
        self._slots.clear()

    # ==================== Export ====================

    def to_payload(self) -> List[Dict[str, int]]:
        """Slots as plain dicts, ready to hand to the tutor store."""
        return [slot.model_dump() for slot in self.slots]
