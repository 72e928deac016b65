"""Reservation model"""

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, Date, DateTime, Text, Index, Uuid, text

from brewbliss.database import Base


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle states"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Occasion(str, enum.Enum):
    """Occasions a guest can pick on the booking form"""
    NONE = ""
    BIRTHDAY = "birthday"
    ANNIVERSARY = "anniversary"
    BUSINESS = "business"
    DATE = "date"
    FAMILY = "family"
    OTHER = "other"


# Statuses that hold their slot
ACTIVE_STATUSES = (ReservationStatus.PENDING.value, ReservationStatus.CONFIRMED.value)

_ACTIVE_SLOT_WHERE = text("status IN ('pending', 'confirmed')")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Reservation(Base):
    """Table reservations"""
    __tablename__ = "reservations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # Guest information
    name = Column(String(100), nullable=False)
    email = Column(String(254), nullable=False)
    phone = Column(String(20), nullable=False, index=True)

    # Reservation details
    guests = Column(Integer, nullable=False)
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # HH:MM, 24-hour
    occasion = Column(String(20), nullable=False, default=Occasion.NONE.value)
    notes = Column(Text)

    # Status
    status = Column(String(20), nullable=False, default=ReservationStatus.PENDING.value, index=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        # At most one active reservation per slot
        Index(
            "uq_reservations_active_slot",
            "date",
            "time",
            unique=True,
            postgresql_where=_ACTIVE_SLOT_WHERE,
            sqlite_where=_ACTIVE_SLOT_WHERE,
        ),
    )

    def __repr__(self) -> str:
        return f"<Reservation {self.id} {self.date} {self.time} {self.status}>"
