"""
Availability API Endpoints

Weekly schedule editing for tutors and time selection for students.

Endpoints:
- GET /tutors/{tutor_id}/availability - Stored slots plus the editor or booking grid
- POST /tutors/{tutor_id}/availability/toggle - Toggle one cell of the caller's local copy
- PUT /tutors/{tutor_id}/availability - Commit a slot list to the tutor store
- POST /tutors/{tutor_id}/availability/select - Pick a lesson start in the booking view

The toggle endpoint is stateless: the caller sends its current slot list and
gets the edited list back. Nothing reaches the store until the PUT.
"""

import logging
from typing import List

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from tutormatch.algorithms.availability import AvailabilityModel
from tutormatch.algorithms.availability_editor import AvailabilityEditor, BookingSelectionView
from tutormatch.api.common import standard_response, store_request_id
from tutormatch.constants import ALGORITHM_AVAILABILITY_EDITOR
from tutormatch.schemas.availability import AvailabilitySlot
from tutormatch.tools import tutor_store_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tutors", tags=["availability"])

# ============================================================================
# Schemas
# ============================================================================


class ToggleRequest(BaseModel):
    """Request body for toggling one editor cell."""
    slots: List[AvailabilitySlot] = Field(default_factory=list, description="Caller's current weekly slots")
    weekday: int = Field(..., description="Weekday index (0 = Monday)")
    minute: int = Field(..., description="Cell start, minutes since midnight")


class CommitRequest(BaseModel):
    """Request body for replacing the stored weekly schedule."""
    slots: List[AvailabilitySlot] = Field(default_factory=list, description="Complete new weekly schedule")


class SelectionCell(BaseModel):
    day: str = Field(..., description="Weekday name, e.g. Monday")
    time: str = Field(..., description="Grid label, e.g. 9:00 AM")


class SelectRequest(BaseModel):
    """Request body for picking a booking time."""
    weekday: int = Field(..., description="Weekday index (0 = Monday)")
    minute: int = Field(..., description="Cell start, minutes since midnight")
    selected: List[SelectionCell] = Field(default_factory=list, description="Cells already highlighted")


# ============================================================================
# Endpoints
# ============================================================================


def _parse_selected(values: List[str]) -> List[dict]:
    """'Monday 9:00 AM' -> {"day": "Monday", "time": "9:00 AM"}; malformed entries are dropped."""
    cells = []
    for value in values:
        day, _, time = value.strip().partition(" ")
        if day and time:
            cells.append({"day": day, "time": time.strip()})
    return cells


@router.get("/{tutor_id}/availability")
async def get_availability(
    tutor_id: str,
    read_only: bool = Query(False, description="Render the booking view instead of the editor"),
    selected: List[str] = Query([], description="Highlighted booking cells, e.g. 'Monday 9:00 AM'")
):
    """Stored weekly slots with the grid rendered for editing or booking."""
    slots = await tutor_store_client.get_weekly_availability(tutor_id, request_id=store_request_id())

    if read_only:
        grid = BookingSelectionView(slots, selected=_parse_selected(selected)).grid()
    else:
        grid = AvailabilityEditor(slots).grid()

    return standard_response(
        message=f"Tutor {tutor_id} has {len(slots)} weekly slots",
        data={
            "tutor_id": tutor_id,
            "slots": [slot.model_dump() for slot in slots],
            "read_only": read_only,
            "grid": grid,
        },
        algorithm=ALGORITHM_AVAILABILITY_EDITOR,
        sources=["tutor_store"]
    )


@router.post("/{tutor_id}/availability/toggle")
async def toggle_availability(tutor_id: str, body: ToggleRequest):
    """Flip one cell in the caller's slot list and return the result."""
    editor = AvailabilityEditor(body.slots)
    state = editor.toggle(body.weekday, body.minute)
    slots = editor.commit_payload()

    return standard_response(
        message=f"Cell is now {state.value}",
        data={
            "tutor_id": tutor_id,
            "weekday": body.weekday,
            "minute": body.minute,
            "state": state.value,
            "slots": [slot.model_dump() for slot in slots],
        },
        algorithm=ALGORITHM_AVAILABILITY_EDITOR,
        sources=["request"]
    )


@router.put("/{tutor_id}/availability")
async def commit_availability(tutor_id: str, body: CommitRequest):
    """Replace the tutor's stored weekly schedule; overlapping slots are rejected with 400."""
    model = AvailabilityModel(body.slots)

    written = await tutor_store_client.set_weekly_availability(
        tutor_id, model.slots, request_id=store_request_id()
    )

    return standard_response(
        message=f"Saved {written} weekly slots",
        data={"tutor_id": tutor_id, "slots": model.to_payload(), "count": written},
        algorithm=ALGORITHM_AVAILABILITY_EDITOR,
        sources=["tutor_store"]
    )


@router.post("/{tutor_id}/availability/select")
async def select_time(tutor_id: str, body: SelectRequest):
    """Pick a lesson start; rejected unless the tutor is free at that cell."""
    slots = await tutor_store_client.get_weekly_availability(tutor_id, request_id=store_request_id())

    view = BookingSelectionView(slots, selected=[cell.model_dump() for cell in body.selected])
    selection = view.select(body.weekday, body.minute)

    return standard_response(
        message=f"Selected {selection['day']} at {selection['time']}",
        data={"tutor_id": tutor_id, "selection": selection},
        algorithm=ALGORITHM_AVAILABILITY_EDITOR,
        sources=["tutor_store"]
    )
