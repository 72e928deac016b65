"""Reservation domain services"""

from brewbliss.services.conflicts import has_conflict
from brewbliss.services.reservations import ReservationPage, ReservationService, parse_reservation_id
from brewbliss.services.validation import parse_reservation, validate_reservation

__all__ = [
    "has_conflict",
    "ReservationPage",
    "ReservationService",
    "parse_reservation_id",
    "parse_reservation",
    "validate_reservation",
]
