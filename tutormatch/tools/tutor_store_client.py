"""
Tutor Store HTTP Client

Async interface to the tutor store service that owns tutor, subject and
weekly availability records. Uses a module-level singleton AsyncClient for
connection pooling.

Functions:
- get_tutors: List tutor records
- get_tutor_subjects: Subjects taught by one tutor
- get_weekly_availability: One tutor's weekly slots
- set_weekly_availability: Replace one tutor's weekly slots (delete-old/insert-new on the store side)
- load_tutor_snapshots: Tutors with subjects and availability attached
- aclose_client: Close HTTP client (call during shutdown)

Backend errors are raised as tutormatch.core.errors.AppError subclasses.
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from tutormatch.core.config import settings
from tutormatch.core.errors import ServiceUnavailableError, InternalError, from_http_exception
from tutormatch.schemas.availability import AvailabilitySlot
from tutormatch.schemas.tutor import SubjectOffering, Tutor

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration
# ============================================================================

TUTORS_PATH = "/tutors"
TUTOR_SUBJECTS_PATH = "/tutors/{tutor_id}/subjects"
TUTOR_AVAILABILITY_PATH = "/tutors/{tutor_id}/availability"


# ============================================================================
# Module-level HTTP Client
# ============================================================================

_client: Optional[httpx.AsyncClient] = None


def get_client() -> httpx.AsyncClient:
    """Get or create module-level httpx.AsyncClient singleton."""
    global _client

    if _client is None or _client.is_closed:
        limits = httpx.Limits(
            max_connections=settings.TUTOR_STORE_MAX_CONNECTIONS,
            max_keepalive_connections=settings.TUTOR_STORE_MAX_KEEPALIVE
        )

        _client = httpx.AsyncClient(
            base_url=settings.TUTOR_STORE_URL,
            timeout=settings.TUTOR_STORE_TIMEOUT,
            limits=limits,
            follow_redirects=False
        )
        logger.info(f"Initialized tutor store client for {settings.TUTOR_STORE_URL}")

    return _client


async def aclose_client() -> None:
    """Close module-level httpx.AsyncClient gracefully."""
    global _client

    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.info("Closed tutor store httpx.AsyncClient")
    _client = None


# ============================================================================
# Helpers
# ============================================================================


def _build_headers(request_id: Optional[str] = None) -> Dict[str, str]:
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    if request_id:
        headers["x-request-id"] = request_id

    return headers


def _extract_items(data: Any, *keys: str) -> List[Any]:
    """Pull the record list out of {"data": [...]}, {"<key>": [...]} or a bare list."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("data",) + keys:
            value = data.get(key)
            if isinstance(value, list):
                return value
    return []


def _first(record: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def _normalize_slot(record: Any) -> Optional[AvailabilitySlot]:
    """Store slot record (camelCase or snake_case) -> AvailabilitySlot, None if invalid."""
    if not isinstance(record, dict):
        return None
    try:
        return AvailabilitySlot(
            weekday=_first(record, "weekday", "dayOfWeek"),
            start_minutes=_first(record, "start_minutes", "startMinutes"),
            end_minutes=_first(record, "end_minutes", "endMinutes"),
        )
    except PydanticValidationError as e:
        logger.warning(f"Skipping invalid availability record {record!r}: {e.error_count()} errors")
        return None


def _normalize_subject(record: Any) -> Optional[SubjectOffering]:
    if isinstance(record, str):
        record = {"name": record}
    if not isinstance(record, dict):
        return None
    try:
        return SubjectOffering(
            name=_first(record, "name", "subject"),
            level=_first(record, "level"),
            price_override=_first(record, "price_override", "priceOverride") or None,
        )
    except PydanticValidationError as e:
        logger.warning(f"Skipping invalid subject record {record!r}: {e.error_count()} errors")
        return None


def _normalize_tutor(record: Any) -> Optional[Dict[str, Any]]:
    """
    Store tutor record -> kwargs for Tutor.

    Required: id. A zero or missing price becomes None (no price preference
    can be scored), rating defaults to 0.
    """
    if not isinstance(record, dict):
        return None

    tutor_id = _first(record, "id", "tutorId", "uid")
    if not tutor_id:
        return None

    return {
        "id": str(tutor_id),
        "name": _first(record, "name", "displayName", "fullName"),
        "price_per_hour": _first(record, "price_per_hour", "pricePerHour") or None,
        "rating_avg": float(_first(record, "rating_avg", "ratingAvg") or 0.0),
        "rating_count": int(_first(record, "rating_count", "ratingCount") or 0),
        "languages": list(_first(record, "languages") or []),
        "verified": bool(_first(record, "verified")),
    }


async def _request(method: str, path: str, request_id: Optional[str] = None, **kwargs) -> Any:
    """Send a request to the store and return the decoded JSON body (None when empty)."""
    try:
        client = get_client()
        response = await client.request(method, path, headers=_build_headers(request_id), **kwargs)
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    except httpx.HTTPStatusError as e:
        logger.warning(f"Tutor store error {e.response.status_code} on {method} {path}")
        raise from_http_exception(e) from e
    except (httpx.ConnectError, httpx.TimeoutException, httpx.NetworkError) as e:
        logger.error(f"Tutor store connection error: {type(e).__name__}: {e}")
        raise ServiceUnavailableError(
            f"Cannot connect to tutor store: {type(e).__name__}"
        ) from e
    except ValueError as e:
        logger.exception(f"Tutor store returned invalid JSON on {method} {path}")
        raise InternalError("Invalid response from tutor store") from e


# ============================================================================
# Public API
# ============================================================================


async def get_tutors(
    verified: Optional[bool] = None,
    limit: Optional[int] = None,
    request_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    List tutor records (without subjects and availability).

    Returns:
        Normalized tutor dicts; records without an id are dropped
    """
    params: Dict[str, Any] = {"role": "tutor"}
    if verified is not None:
        params["verified"] = "true" if verified else "false"
    if limit:
        params["limit"] = limit

    data = await _request("GET", TUTORS_PATH, request_id, params=params)
    records = _extract_items(data, "tutors")
    tutors = [t for t in (_normalize_tutor(r) for r in records) if t]

    logger.info(f"Retrieved {len(tutors)} tutors (filtered from {len(records)} records)")
    return tutors


async def get_tutor_subjects(tutor_id: str, request_id: Optional[str] = None) -> List[SubjectOffering]:
    data = await _request("GET", TUTOR_SUBJECTS_PATH.format(tutor_id=tutor_id), request_id)
    records = _extract_items(data, "subjects")
    return [s for s in (_normalize_subject(r) for r in records) if s]


async def get_weekly_availability(tutor_id: str, request_id: Optional[str] = None) -> List[AvailabilitySlot]:
    data = await _request("GET", TUTOR_AVAILABILITY_PATH.format(tutor_id=tutor_id), request_id)
    records = _extract_items(data, "weekly", "slots")
    return [s for s in (_normalize_slot(r) for r in records) if s]


async def set_weekly_availability(
    tutor_id: str,
    slots: Iterable[AvailabilitySlot],
    request_id: Optional[str] = None
) -> int:
    """
    Replace the tutor's stored weekly schedule with the given slots.

    The store performs the delete-old/insert-new swap in one transaction.

    Returns:
        Number of slots written
    """
    payload = [
        {"weekday": s.weekday, "startMinutes": s.start_minutes, "endMinutes": s.end_minutes}
        for s in slots
    ]
    await _request(
        "PUT",
        TUTOR_AVAILABILITY_PATH.format(tutor_id=tutor_id),
        request_id,
        json={"slots": payload}
    )
    logger.info(f"Committed {len(payload)} weekly slots for tutor {tutor_id}")
    return len(payload)


async def _attach_details(record: Dict[str, Any], request_id: Optional[str]) -> Tutor:
    subjects, availability = await asyncio.gather(
        get_tutor_subjects(record["id"], request_id),
        get_weekly_availability(record["id"], request_id),
    )
    return Tutor(**record, subjects=subjects, availability=availability)


async def load_tutor_snapshots(
    verified: Optional[bool] = None,
    request_id: Optional[str] = None
) -> List[Tutor]:
    """
    Tutors with subjects and weekly availability attached.

    Per-tutor lookups run concurrently; a tutor record the Tutor model rejects
    (e.g. rating out of range) is skipped with a warning.
    """
    records = await get_tutors(verified=verified, request_id=request_id)
    results = await asyncio.gather(
        *(_attach_details(record, request_id) for record in records),
        return_exceptions=True
    )

    tutors = []
    for record, result in zip(records, results):
        if isinstance(result, PydanticValidationError):
            logger.warning(f"Skipping tutor {record['id']}: {result.error_count()} validation errors")
            continue
        if isinstance(result, BaseException):
            raise result
        tutors.append(result)

    logger.info(f"Loaded {len(tutors)} tutor snapshots")
    return tutors
