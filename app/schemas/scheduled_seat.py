from uuid import UUID
from datetime import date
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.schemas.seat import SeatInfo
from app.schemas.employee import EmployeeResponse
from app.utils.dates import truncate_to_day


class ScheduledSeatCreate(BaseModel):
    """
    Platz über id oder Nummer (plus seat_row_id falls die Nummer mehrfach vorkommt),
    Mitarbeiter über id oder email.
    Uhrzeiten in start_date/end_date werden auf den Kalendertag gekürzt.
    """
    seat: Optional[UUID] = None
    seat_number: Optional[int] = None
    seat_row_id: Optional[UUID] = None
    employee: Optional[UUID] = None
    employee_email: Optional[str] = None
    start_date: date
    end_date: date
    repeat_every: Optional[int] = Field(default=None, ge=1)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _truncate(cls, value):
        if isinstance(value, (str, date)):
            return truncate_to_day(value)
        return value


class ScheduledSeatQuery(BaseModel):
    id: Optional[UUID] = None
    seat: Optional[UUID] = None
    seat_number: Optional[int] = None
    seat_row_id: Optional[UUID] = None
    employee: Optional[UUID] = None
    employee_email: Optional[str] = None
    employee_first_name: Optional[str] = None
    employee_last_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ScheduledSeatResponse(BaseModel):
    id: UUID
    seat: SeatInfo
    employee: EmployeeResponse
    start_date: date
    end_date: date
    repeat_every: Optional[int] = None

    model_config = {"from_attributes": True}
