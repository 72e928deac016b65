"""Reservation schemas"""

from datetime import date as date_type, datetime
from typing import Annotated, ClassVar, List, Optional
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from brewbliss.models.reservation import Occasion, ReservationStatus

EMAIL_PATTERN = r"^[A-Za-z0-9_]+(?:[.-][A-Za-z0-9_]+)*@[A-Za-z0-9_]+(?:[.-][A-Za-z0-9_]+)*\.[A-Za-z0-9_]{2,3}$"
PHONE_PATTERN = r"^\+?[0-9]{1,16}$"
TIME_PATTERN = r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$"

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
Email = Annotated[
    str,
    StringConstraints(strip_whitespace=True, to_lower=True, max_length=254, pattern=EMAIL_PATTERN),
]
Phone = Annotated[str, StringConstraints(strip_whitespace=True, pattern=PHONE_PATTERN)]
Guests = Annotated[int, Field(ge=1, le=20)]
TimeOfDay = Annotated[str, StringConstraints(strip_whitespace=True, pattern=TIME_PATTERN)]
Notes = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

REQUIRED_FIELDS = ("name", "email", "phone", "guests", "date", "time", "occasion", "status")


class _ReservationRules(BaseModel):
    """Field rules shared by full and partial payloads"""

    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    # Whether an explicit null status falls back to pending
    null_status_is_default: ClassVar[bool] = False

    @field_validator(*REQUIRED_FIELDS, mode="before", check_fields=False)
    @classmethod
    def reject_null(cls, value, info: ValidationInfo):
        if info.field_name == "status":
            # The booking form posts a blank status for "use the default"
            if value == "" or (value is None and cls.null_status_is_default):
                return ReservationStatus.PENDING.value
        if value is None:
            raise PydanticCustomError("missing", "Field required")
        return value

    @field_validator("time", check_fields=False)
    @classmethod
    def zero_pad_time(cls, value: str) -> str:
        hours, minutes = value.split(":")
        return f"{int(hours):02d}:{minutes}"

    @field_validator("date", check_fields=False)
    @classmethod
    def not_in_past(cls, value: date_type, info: ValidationInfo) -> date_type:
        today = (info.context or {}).get("today") or date_type.today()
        if value < today:
            raise PydanticCustomError("date_in_past", "Reservation date cannot be in the past")
        return value


class ReservationCreate(_ReservationRules):
    """Create reservation request"""
    null_status_is_default: ClassVar[bool] = True

    name: Name
    email: Email
    phone: Phone
    guests: Guests
    date: date_type
    time: TimeOfDay
    occasion: Occasion = Field(Occasion.NONE, validate_default=True)
    notes: Optional[Notes] = None
    status: ReservationStatus = Field(ReservationStatus.PENDING, validate_default=True)


class ReservationUpdate(_ReservationRules):
    """Partial update; only keys present in the payload are applied"""
    name: Optional[Name] = None
    email: Optional[Email] = None
    phone: Optional[Phone] = None
    guests: Optional[Guests] = None
    date: Optional[date_type] = None
    time: Optional[TimeOfDay] = None
    occasion: Optional[Occasion] = None
    notes: Optional[Notes] = None
    status: Optional[ReservationStatus] = None

    @property
    def moves_slot(self) -> bool:
        return bool({"date", "time"} & self.model_fields_set)


class ReservationResponse(BaseModel):
    """Reservation response"""
    id: UUID
    name: str
    email: str
    phone: str
    guests: int
    date: date_type
    time: str
    occasion: str
    notes: Optional[str]
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class ReservationEnvelope(BaseModel):
    reservation: ReservationResponse


class ReservationMessageResponse(BaseModel):
    message: str
    reservation: ReservationResponse


class ReservationListResponse(BaseModel):
    """Paginated reservation list"""
    reservations: List[ReservationResponse]
    total_pages: int = Field(alias="totalPages")
    current_page: int = Field(alias="currentPage")
    total: int

    model_config = ConfigDict(populate_by_name=True)


class PhoneLookupResponse(BaseModel):
    """Reservations booked under one phone number"""
    reservations: List[ReservationResponse]
    count: int


class MessageResponse(BaseModel):
    message: str
