import logging
from uuid import UUID
from typing import Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Seat
from app.schemas.seat import SeatLookup
from app.services.results import ServiceError, not_found, INVALID_ID_MESSAGE
from app.utils.ids import parse_id

logger = logging.getLogger("app.services.seat_service")


def find_seat_by_id(db: Session, seat_id: Union[UUID, str]) -> Seat | ServiceError:
    uid = parse_id(seat_id)
    if uid is None:
        return not_found(INVALID_ID_MESSAGE)
    try:
        seat = db.get(Seat, uid)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"DB-Fehler beim Laden von Platz {seat_id}: {e}")
        return not_found(INVALID_ID_MESSAGE)
    if not seat:
        return not_found("Platz nicht gefunden")
    return seat


def find_seat(db: Session, criteria: SeatLookup) -> Seat | ServiceError:
    """
    Löst die Suchkriterien zu genau einem Platz auf.
    - id vorhanden: Suche per id
    - sonst Platznummer, optional eingeschränkt auf eine Reihe
    Mehrere Treffer gelten als nicht gefunden (nicht eindeutig).
    """
    if criteria.id:
        return find_seat_by_id(db, criteria.id)
    if criteria.number is None:
        return not_found("Kein Platz angegeben")

    query = db.query(Seat).filter(Seat.number == criteria.number)
    if criteria.row_id:
        query = query.filter(Seat.row_id == criteria.row_id)
    seats = query.limit(2).all()

    if not seats:
        return not_found("Platz nicht gefunden")
    if len(seats) > 1:
        return not_found(f"Platznummer {criteria.number} ist nicht eindeutig, bitte Reihe oder id angeben")
    return seats[0]
