"""Domain errors raised by the reservation service.

The HTTP layer maps each of these to a status code in
``brewbliss.api.exceptions``; nothing here knows about HTTP.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single rejected field and the reason it was rejected."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class ReservationError(Exception):
    """Base class for reservation domain errors."""

    message = "Reservation error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ReservationValidationError(ReservationError):
    """One or more fields are malformed or out of range."""

    message = "Validation error"

    def __init__(self, errors: List[FieldError]):
        super().__init__()
        self.errors = list(errors)


class SlotUnavailableError(ReservationError):
    """Another active reservation already holds the requested slot."""

    message = "A reservation already exists for this date and time"
    reason = "Time slot unavailable"


class ReservationNotFoundError(ReservationError):
    message = "Reservation not found"


class InvalidReservationIdError(ReservationError):
    message = "Invalid reservation ID"


class ReservationStorageError(ReservationError):
    """The store failed underneath an operation."""

    def __init__(self, message: str, detail: str):
        super().__init__(message)
        self.detail = detail
