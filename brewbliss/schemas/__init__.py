"""Pydantic schemas for request/response validation"""

from brewbliss.schemas.reservation import (
    ReservationCreate,
    ReservationUpdate,
    ReservationResponse,
    ReservationEnvelope,
    ReservationMessageResponse,
    ReservationListResponse,
    PhoneLookupResponse,
    MessageResponse,
)

__all__ = [
    "ReservationCreate",
    "ReservationUpdate",
    "ReservationResponse",
    "ReservationEnvelope",
    "ReservationMessageResponse",
    "ReservationListResponse",
    "PhoneLookupResponse",
    "MessageResponse",
]
