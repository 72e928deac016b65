"""Database models"""

from brewbliss.models.reservation import (
    ACTIVE_STATUSES,
    Occasion,
    Reservation,
    ReservationStatus,
)

__all__ = [
    "ACTIVE_STATUSES",
    "Occasion",
    "Reservation",
    "ReservationStatus",
]
