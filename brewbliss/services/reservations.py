"""Reservation service: CRUD over the reservations table with slot checks"""

import math
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, List, Optional
from uuid import UUID

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from brewbliss.errors import (
    FieldError,
    InvalidReservationIdError,
    ReservationNotFoundError,
    ReservationStorageError,
    ReservationValidationError,
    SlotUnavailableError,
)
from brewbliss.models.reservation import Reservation
from brewbliss.services.conflicts import has_conflict
from brewbliss.services.validation import parse_reservation

logger = structlog.get_logger()

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Keeps OFFSET inside the driver's 64-bit integer range
MAX_PAGE = 100_000
MAX_LIMIT = 100


def parse_reservation_id(raw: Any) -> UUID:
    """Coerce a path identifier to a UUID, or raise InvalidReservationIdError."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        raise InvalidReservationIdError() from None


@dataclass
class ReservationPage:
    reservations: List[Reservation]
    total: int
    total_pages: int
    current_page: int


class ReservationService:
    """Reservation operations bound to one database session"""

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _storage(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            await self.session.rollback()
            detail = str(getattr(exc, "orig", None) or exc)
            logger.error("Reservation storage failure", action=action, error=detail)
            raise ReservationStorageError(f"Error {action}", detail) from exc

    async def _commit(self) -> None:
        # The partial unique index rejects a second active reservation per slot
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise SlotUnavailableError() from exc

    async def _ensure_slot_free(self, day: date, time: str, exclude_id: Optional[UUID] = None) -> None:
        if await has_conflict(self.session, day, time, exclude_id=exclude_id):
            logger.info("Reservation slot unavailable", date=day.isoformat(), time=time)
            raise SlotUnavailableError()

    async def create(self, fields: Any) -> Reservation:
        """Validate and persist a new reservation in a free slot"""
        payload = parse_reservation(fields)

        async with self._storage("adding reservation"):
            await self._ensure_slot_free(payload.date, payload.time)

            reservation = Reservation(**payload.model_dump())
            self.session.add(reservation)
            await self._commit()
            await self.session.refresh(reservation)

        logger.info(
            "Reservation created",
            reservation_id=str(reservation.id),
            date=reservation.date.isoformat(),
            time=reservation.time,
            guests=reservation.guests,
        )
        return reservation

    async def list(
        self,
        status: Optional[str] = None,
        day: Optional[date] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> ReservationPage:
        """Page through reservations ordered by date then time"""
        errors = []
        if not 1 <= page <= MAX_PAGE:
            errors.append(FieldError("page", f"Page must be between 1 and {MAX_PAGE}"))
        if not 1 <= limit <= MAX_LIMIT:
            errors.append(FieldError("limit", f"Limit must be between 1 and {MAX_LIMIT}"))
        if errors:
            raise ReservationValidationError(errors)

        filters = []
        if status:
            filters.append(Reservation.status == status)
        if day:
            filters.append(Reservation.date >= day)
            filters.append(Reservation.date < day + timedelta(days=1))

        async with self._storage("fetching reservations"):
            total_result = await self.session.execute(
                select(func.count(Reservation.id)).where(*filters)
            )
            total = total_result.scalar() or 0

            offset = (page - 1) * limit
            result = await self.session.execute(
                select(Reservation)
                .where(*filters)
                .order_by(Reservation.date.asc(), Reservation.time.asc())
                .offset(offset)
                .limit(limit)
            )
            reservations = list(result.scalars().all())

        return ReservationPage(
            reservations=reservations,
            total=total,
            total_pages=math.ceil(total / limit),
            current_page=page,
        )

    async def get(self, reservation_id: Any) -> Reservation:
        reservation_id = parse_reservation_id(reservation_id)
        async with self._storage("fetching reservation"):
            reservation = await self.session.get(Reservation, reservation_id)
        if reservation is None:
            raise ReservationNotFoundError()
        return reservation

    async def update(self, reservation_id: Any, fields: Any) -> Reservation:
        """Apply a partial update.

        The slot is re-checked only when the payload carries ``date`` or
        ``time``; a missing half of the slot falls back to the stored value.
        """
        reservation_id = parse_reservation_id(reservation_id)
        changes = parse_reservation(fields, partial=True)

        async with self._storage("updating reservation"):
            reservation = await self.session.get(Reservation, reservation_id)
            if reservation is None:
                raise ReservationNotFoundError()

            if changes.moves_slot:
                day = changes.date if "date" in changes.model_fields_set else reservation.date
                time = changes.time if "time" in changes.model_fields_set else reservation.time
                await self._ensure_slot_free(day, time, exclude_id=reservation.id)

            for field, value in changes.model_dump(exclude_unset=True).items():
                setattr(reservation, field, value)

            await self._commit()
            await self.session.refresh(reservation)

        logger.info(
            "Reservation updated",
            reservation_id=str(reservation.id),
            fields=sorted(changes.model_fields_set),
        )
        return reservation

    async def delete(self, reservation_id: Any) -> None:
        reservation_id = parse_reservation_id(reservation_id)
        async with self._storage("deleting reservation"):
            reservation = await self.session.get(Reservation, reservation_id)
            if reservation is None:
                raise ReservationNotFoundError()

            await self.session.delete(reservation)
            await self.session.commit()

        logger.info("Reservation deleted", reservation_id=str(reservation_id))

    async def list_by_phone(self, phone: str) -> List[Reservation]:
        """All reservations booked under ``phone``, ordered by date then time"""
        async with self._storage("fetching reservations"):
            result = await self.session.execute(
                select(Reservation)
                .where(Reservation.phone == phone)
                .order_by(Reservation.date.asc(), Reservation.time.asc())
            )
            return list(result.scalars().all())
