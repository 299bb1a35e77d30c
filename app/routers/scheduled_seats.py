import logging
from datetime import date
from typing import Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import User
from app.schemas.scheduled_seat import ScheduledSeatCreate, ScheduledSeatQuery, ScheduledSeatResponse
from app.services import scheduled_seat_service
from app.services.results import raise_if_error
from app.utils.dates import today
from app.utils.security import get_current_user

logger = logging.getLogger("app.routers.scheduled_seats")

router = APIRouter(prefix="/scheduled-seats", tags=["scheduled-seats"])


@router.post("/", response_model=ScheduledSeatResponse)
def create_scheduled_seat(
    scheduled: ScheduledSeatCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return raise_if_error(scheduled_seat_service.create_scheduled(db, scheduled))


@router.get("/", response_model=Union[ScheduledSeatResponse, list[ScheduledSeatResponse]])
def get_scheduled_seats(
    query: ScheduledSeatQuery = Depends(),
    db: Session = Depends(get_db)
):
    """
    Suche nach Buchungen. Es zählt nur das erste gesetzte Kriterium:
    id -> Platz -> Mitarbeiter -> Zeitraum -> alle.
    """
    return raise_if_error(scheduled_seat_service.find_scheduled(db, query))


@router.get("/active", response_model=list[ScheduledSeatResponse])
def get_active_scheduled_seats(
    day: Optional[date] = Query(default=None),
    db: Session = Depends(get_db)
):
    return raise_if_error(scheduled_seat_service.find_active_on(db, day or today()))


@router.get("/{id}", response_model=ScheduledSeatResponse)
def get_scheduled_seat(id: UUID, db: Session = Depends(get_db)):
    return raise_if_error(scheduled_seat_service.find_scheduled_by_id(db, id))


@router.patch("/{id}", response_model=ScheduledSeatResponse)
def update_scheduled_seat(
    id: UUID,
    scheduled: ScheduledSeatCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return raise_if_error(scheduled_seat_service.update_scheduled_by_id(db, id, scheduled))


@router.delete("/{id}")
def delete_scheduled_seat(
    id: UUID,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    deleted_id = raise_if_error(scheduled_seat_service.delete_scheduled_by_id(db, id))
    return {"message": "Buchung gelöscht", "id": str(deleted_id)}
