"""Slot conflict detection"""

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from brewbliss.models.reservation import ACTIVE_STATUSES, Reservation


async def has_conflict(
    session: AsyncSession,
    date: date,
    time: str,
    exclude_id: Optional[UUID] = None,
) -> bool:
    """Return True when another active reservation holds exactly this slot.

    The match is exact on day and HH:MM; cancelled and completed
    reservations never hold a slot.
    """
    query = select(Reservation.id).where(
        Reservation.date == date,
        Reservation.time == time,
        Reservation.status.in_(ACTIVE_STATUSES),
    )
    if exclude_id is not None:
        query = query.where(Reservation.id != exclude_id)

    result = await session.execute(query.limit(1))
    return result.first() is not None
