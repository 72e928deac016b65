"""Reservation management API endpoints"""

from datetime import date as date_type
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from brewbliss.database import get_db
from brewbliss.models.reservation import Reservation
from brewbliss.schemas.reservation import (
    MessageResponse,
    PhoneLookupResponse,
    ReservationEnvelope,
    ReservationListResponse,
    ReservationMessageResponse,
    ReservationResponse,
)
from brewbliss.services.reservations import DEFAULT_LIMIT, DEFAULT_PAGE, ReservationService

router = APIRouter()


def get_reservation_service(db: AsyncSession = Depends(get_db)) -> ReservationService:
    return ReservationService(db)


def _serialize(reservation: Reservation) -> ReservationResponse:
    return ReservationResponse.model_validate(reservation)


@router.post("", response_model=ReservationMessageResponse, status_code=201)
async def create_reservation(
    payload: Any = Body(...),
    service: ReservationService = Depends(get_reservation_service),
):
    """Create a new reservation"""
    reservation = await service.create(payload)
    return ReservationMessageResponse(
        message="Reservation created successfully",
        reservation=_serialize(reservation),
    )


@router.get("", response_model=ReservationListResponse)
async def list_reservations(
    status: Optional[str] = None,
    date: Optional[date_type] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
    service: ReservationService = Depends(get_reservation_service),
):
    """List reservations, optionally for one status and/or one day"""
    result = await service.list(status=status, day=date, page=page, limit=limit)
    return ReservationListResponse(
        reservations=[_serialize(r) for r in result.reservations],
        total_pages=result.total_pages,
        current_page=result.current_page,
        total=result.total,
    )


@router.get("/phone/{phone}", response_model=PhoneLookupResponse)
async def list_reservations_by_phone(
    phone: str,
    service: ReservationService = Depends(get_reservation_service),
):
    """Get every reservation booked under a phone number"""
    reservations = await service.list_by_phone(phone)
    return PhoneLookupResponse(
        reservations=[_serialize(r) for r in reservations],
        count=len(reservations),
    )


@router.get("/{reservation_id}", response_model=ReservationEnvelope)
async def get_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service),
):
    """Get reservation details"""
    reservation = await service.get(reservation_id)
    return ReservationEnvelope(reservation=_serialize(reservation))


@router.put("/{reservation_id}", response_model=ReservationMessageResponse)
async def update_reservation(
    reservation_id: str,
    payload: Any = Body(...),
    service: ReservationService = Depends(get_reservation_service),
):
    """Update reservation"""
    reservation = await service.update(reservation_id, payload)
    return ReservationMessageResponse(
        message="Reservation updated successfully",
        reservation=_serialize(reservation),
    )


@router.delete("/{reservation_id}", response_model=MessageResponse)
async def delete_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service),
):
    """Delete a reservation"""
    await service.delete(reservation_id)
    return MessageResponse(message="Reservation deleted successfully")
