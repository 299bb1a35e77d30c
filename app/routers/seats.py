from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from uuid import UUID
from typing import Optional

from app.database import get_db
from app.models import Seat, Row, User
from app.utils.security import get_current_user
from app.schemas.seat import SeatCreate, SeatResponse

router = APIRouter(prefix="/seats", tags=["seats"])


@router.get("/", response_model=list[SeatResponse])
def get_all_seats(
    number: Optional[int] = None,
    row_id: Optional[UUID] = None,
    db: Session = Depends(get_db)
):
    query = db.query(Seat)
    if number is not None:
        query = query.filter(Seat.number == number)
    if row_id:
        query = query.filter(Seat.row_id == row_id)
    return query.order_by(Seat.number).all()


@router.get("/{id}", response_model=SeatResponse)
def get_seat(id: UUID, db: Session = Depends(get_db)):
    seat = db.query(Seat).filter(Seat.id == id).first()
    if not seat:
        raise HTTPException(status_code=404, detail="Platz nicht gefunden")
    return seat


@router.post("/", response_model=SeatResponse)
def create_seat(seat: SeatCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if seat.row_id:
        row = db.query(Row).filter(Row.id == seat.row_id).first()
        if not row:
            raise HTTPException(status_code=404, detail="Reihe nicht gefunden")
        # Platznummer muss innerhalb der Reihe eindeutig sein
        existing = db.query(Seat).filter(Seat.row_id == seat.row_id, Seat.number == seat.number).first()
        if existing:
            raise HTTPException(status_code=400, detail="Platznummer existiert in dieser Reihe bereits")

    new_seat = Seat(**seat.model_dump())
    db.add(new_seat)
    db.commit()
    db.refresh(new_seat)
    return new_seat
