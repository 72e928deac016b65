"""Payload validation for reservations.

Validation is a pure step: it takes the raw JSON payload and returns either a
typed schema or a list of :class:`FieldError`. It never touches the store.
"""

from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from brewbliss.errors import FieldError, ReservationValidationError
from brewbliss.schemas.reservation import ReservationCreate, ReservationUpdate

# Guest-facing wording per field and pydantic error type. "*" is the fallback.
FIELD_MESSAGES = {
    "name": {
        "missing": "Name is required",
        "string_too_short": "Name must be at least 2 characters long",
        "string_too_long": "Name cannot exceed 100 characters",
        "*": "Name must be text",
    },
    "email": {
        "missing": "Email is required",
        "*": "Please enter a valid email address",
    },
    "phone": {
        "missing": "Phone number is required",
        "*": "Please enter a valid phone number",
    },
    "guests": {
        "missing": "Number of guests is required",
        "greater_than_equal": "At least 1 guest is required",
        "less_than_equal": "Maximum 20 guests allowed",
        "*": "Number of guests must be a whole number",
    },
    "date": {
        "missing": "Reservation date is required",
        "date_in_past": "Reservation date cannot be in the past",
        "*": "Please enter a valid date in YYYY-MM-DD format",
    },
    "time": {
        "missing": "Reservation time is required",
        "*": "Please enter a valid time in HH:MM format",
    },
    "occasion": {
        "*": "Occasion must be one of: birthday, anniversary, business, date, family, other",
    },
    "notes": {
        "string_too_long": "Notes cannot exceed 500 characters",
        "*": "Notes must be text",
    },
    "status": {
        "*": "Status must be one of: pending, confirmed, cancelled, completed",
    },
}

# Request locations FastAPI prefixes onto error locs
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATIONS:
        parts = parts[1:]
    return ".".join(parts) or "body"


def field_errors(errors: Iterable[Mapping[str, Any]]) -> List[FieldError]:
    """Translate pydantic error dicts into FieldErrors, one per field."""
    result: List[FieldError] = []
    seen = set()
    for error in errors:
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            field = _field_name(error.get("loc", ()))
        if field in seen:
            continue
        seen.add(field)
        messages = FIELD_MESSAGES.get(field, {})
        message = messages.get(error.get("type"), messages.get("*", error.get("msg", "Invalid value")))
        result.append(FieldError(field=field, message=message))
    return result


def parse_reservation(
    data: Any,
    *,
    partial: bool = False,
    today: Optional[date] = None,
) -> Union[ReservationCreate, ReservationUpdate]:
    """Return the typed payload, or raise ReservationValidationError."""
    schema = ReservationUpdate if partial else ReservationCreate
    try:
        return schema.model_validate(data, context={"today": today})
    except ValidationError as exc:
        raise ReservationValidationError(field_errors(exc.errors())) from exc


def validate_reservation(
    data: Any,
    *,
    partial: bool = False,
    today: Optional[date] = None,
) -> List[FieldError]:
    """Return every field error in ``data``; empty when it is acceptable."""
    try:
        parse_reservation(data, partial=partial, today=today)
    except ReservationValidationError as exc:
        return exc.errors
    return []
