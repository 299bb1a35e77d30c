import enum
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Union
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.models import Employee, ScheduledSeat, Seat
from app.schemas.employee import EmployeeLookup
from app.schemas.scheduled_seat import ScheduledSeatCreate, ScheduledSeatQuery
from app.schemas.seat import SeatLookup
from app.services.employee_service import find_employee
from app.services.results import (
    ErrorKind,
    ServiceError,
    not_found,
    is_error,
    INVALID_ID_MESSAGE,
)
from app.services.seat_service import find_seat
from app.utils.dates import is_active_on, overlaps, today, truncate_to_day
from app.utils.ids import parse_id

logger = logging.getLogger("app.services.scheduled_seat_service")

SCHEDULED_NOT_FOUND = "Buchung nicht gefunden"


@dataclass(frozen=True)
class ConflictingSeat:
    """Platz, den der Mitarbeiter im angefragten Zeitraum schon belegt"""
    id: UUID
    number: int


def _store_failure(db: Session, e: SQLAlchemyError, message: str = "Buchung konnte nicht gespeichert werden") -> ServiceError:
    db.rollback()
    logger.error(f"DB-Fehler ({message}): {e}")
    return ServiceError(ErrorKind.STORE_FAILURE, message)


def _base_query(db: Session):
    return db.query(ScheduledSeat).options(
        joinedload(ScheduledSeat.seat),
        joinedload(ScheduledSeat.employee)
    )


# ============ LESEN ============

def find_scheduled_by_id(db: Session, scheduled_id: Union[UUID, str]) -> ScheduledSeat | ServiceError:
    uid = parse_id(scheduled_id)
    if uid is None:
        return not_found(INVALID_ID_MESSAGE)
    try:
        scheduled = _base_query(db).filter(ScheduledSeat.id == uid).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"DB-Fehler beim Laden von Buchung {scheduled_id}: {e}")
        return not_found(INVALID_ID_MESSAGE)
    if not scheduled:
        return not_found(SCHEDULED_NOT_FOUND)
    return scheduled


def find_by_seat(db: Session, criteria: SeatLookup) -> list[ScheduledSeat] | ServiceError:
    seat = find_seat(db, criteria)
    if is_error(seat):
        return seat
    return _base_query(db).filter(
        ScheduledSeat.seat_id == seat.id
    ).order_by(ScheduledSeat.start_date).all()


def find_by_employee(db: Session, criteria: EmployeeLookup) -> list[ScheduledSeat] | ServiceError:
    employee = find_employee(db, criteria)
    if is_error(employee):
        return employee
    return _base_query(db).filter(
        ScheduledSeat.employee_id == employee.id
    ).order_by(ScheduledSeat.start_date).all()


def find_by_date(db: Session, start_date: Optional[date], end_date: Optional[date]) -> list[ScheduledSeat]:
    """
    Beide Grenzen: Buchungen die komplett im Zeitraum liegen.
    Nur eine Grenze: es wird nur auf diese gefiltert.
    """
    query = _base_query(db)
    if start_date:
        query = query.filter(ScheduledSeat.start_date >= start_date)
    if end_date:
        query = query.filter(ScheduledSeat.end_date <= end_date)
    return query.order_by(ScheduledSeat.start_date).all()


def find_all_scheduled(db: Session) -> list[ScheduledSeat]:
    # Platz und Mitarbeiter kommen über joinedload gleich mit
    return _base_query(db).order_by(ScheduledSeat.start_date).all()


def find_active_on(db: Session, day: date) -> list[ScheduledSeat] | ServiceError:
    """Buchungen die an diesem Tag gelten, inklusive Wiederholungs-Hinweis."""
    try:
        candidates = _base_query(db).filter(ScheduledSeat.start_date <= day).all()
    except SQLAlchemyError as e:
        return _store_failure(db, e, "Buchungen konnten nicht geladen werden")
    return [
        s for s in candidates
        if is_active_on(s.start_date, s.end_date, s.repeat_every, day)
    ]


class QueryMode(enum.Enum):
    BY_ID = "BY_ID"
    BY_SEAT = "BY_SEAT"
    BY_EMPLOYEE = "BY_EMPLOYEE"
    BY_DATE = "BY_DATE"
    ALL = "ALL"


def resolve_query_mode(query: ScheduledSeatQuery) -> QueryMode:
    """Das erste gesetzte Kriterium gewinnt: id, Platz, Mitarbeiter, Datum."""
    if query.id:
        return QueryMode.BY_ID
    if query.seat or query.seat_number is not None:
        return QueryMode.BY_SEAT
    if query.employee or query.employee_email or query.employee_first_name or query.employee_last_name:
        return QueryMode.BY_EMPLOYEE
    if query.start_date or query.end_date:
        return QueryMode.BY_DATE
    return QueryMode.ALL


_QUERY_HANDLERS: dict[QueryMode, Callable] = {
    QueryMode.BY_ID: lambda db, q: find_scheduled_by_id(db, q.id),
    QueryMode.BY_SEAT: lambda db, q: find_by_seat(db, SeatLookup(id=q.seat, number=q.seat_number, row_id=q.seat_row_id)),
    QueryMode.BY_EMPLOYEE: lambda db, q: find_by_employee(db, EmployeeLookup(
        id=q.employee,
        email=q.employee_email,
        first_name=q.employee_first_name,
        last_name=q.employee_last_name
    )),
    QueryMode.BY_DATE: lambda db, q: find_by_date(db, q.start_date, q.end_date),
    QueryMode.ALL: lambda db, q: find_all_scheduled(db),
}


def find_scheduled(db: Session, query: ScheduledSeatQuery):
    mode = resolve_query_mode(query)
    logger.debug(f"Buchungssuche im Modus {mode.value}")
    try:
        return _QUERY_HANDLERS[mode](db, query)
    except SQLAlchemyError as e:
        return _store_failure(db, e, "Buchungen konnten nicht geladen werden")


# ============ KONFLIKTPRÜFUNG ============

def is_seat_scheduled(
    db: Session,
    seat: Seat,
    start_date: date,
    end_date: date,
    except_id: Optional[UUID] = None
) -> bool | ServiceError:
    """
    True wenn der Platz im Zeitraum schon gebucht ist.
    except_id wird ignoriert (beim Update die Buchung selbst).
    """
    scheduled_list = find_by_seat(db, SeatLookup(id=seat.id))
    if is_error(scheduled_list):
        return scheduled_list

    requested = (truncate_to_day(start_date), truncate_to_day(end_date))
    for scheduled in scheduled_list:
        if except_id and scheduled.id == except_id:
            continue
        existing = (truncate_to_day(scheduled.start_date), truncate_to_day(scheduled.end_date))
        if overlaps(requested, existing):
            return True
    return False


def is_employee_has_seat(
    db: Session,
    employee: Employee,
    start_date: date,
    end_date: date,
    except_id: Optional[UUID] = None
) -> Union[bool, ConflictingSeat, ServiceError]:
    """
    False wenn der Mitarbeiter im Zeitraum keinen Platz hat,
    sonst der erste überschneidende Platz (für die Fehlermeldung).
    """
    scheduled_list = find_by_employee(db, EmployeeLookup(id=employee.id))
    if is_error(scheduled_list):
        return scheduled_list

    requested = (truncate_to_day(start_date), truncate_to_day(end_date))
    for scheduled in scheduled_list:
        if except_id and scheduled.id == except_id:
            continue
        existing = (truncate_to_day(scheduled.start_date), truncate_to_day(scheduled.end_date))
        if overlaps(requested, existing):
            return ConflictingSeat(id=scheduled.seat_id, number=scheduled.seat.number)
    return False


# ============ SCHREIBEN ============

@dataclass
class _Pipeline:
    """Zwischenstand einer Buchungsprüfung, jeder Schritt füllt weitere Felder."""
    data: ScheduledSeatCreate
    except_id: Optional[UUID] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    seat: Optional[Seat] = None
    employee: Optional[Employee] = None


def _normalize_dates(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    ctx.start_date = truncate_to_day(ctx.data.start_date)
    ctx.end_date = truncate_to_day(ctx.data.end_date)
    return None


def _check_range(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    if ctx.end_date < ctx.start_date:
        return ServiceError(ErrorKind.INVALID_RANGE, "Enddatum darf nicht vor dem Startdatum liegen")
    return None


def _check_not_past(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    if ctx.start_date < today():
        return ServiceError(ErrorKind.PAST_DATE, "Startdatum darf nicht in der Vergangenheit liegen")
    return None


def _resolve_seat(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    seat = find_seat(db, SeatLookup(id=ctx.data.seat, number=ctx.data.seat_number, row_id=ctx.data.seat_row_id))
    if is_error(seat):
        return seat
    ctx.seat = seat
    return None


def _check_seat_free(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    taken = is_seat_scheduled(db, ctx.seat, ctx.start_date, ctx.end_date, ctx.except_id)
    if is_error(taken):
        return taken
    if taken:
        return ServiceError(ErrorKind.SEAT_TAKEN, "Platz ist in diesem Zeitraum bereits gebucht")
    return None


def _resolve_employee(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    employee = find_employee(db, EmployeeLookup(id=ctx.data.employee, email=ctx.data.employee_email))
    if is_error(employee):
        return employee
    ctx.employee = employee
    return None


def _check_employee_free(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    # Beim Update zählt die eigene Buchung nicht als Konflikt
    conflict = is_employee_has_seat(db, ctx.employee, ctx.start_date, ctx.end_date, ctx.except_id)
    if is_error(conflict):
        return conflict
    if conflict:
        return ServiceError(
            ErrorKind.EMPLOYEE_DOUBLE_BOOKED,
            f"Mitarbeiter hat in diesem Zeitraum bereits einen Platz ({conflict.number})",
            seat_number=conflict.number
        )
    return None


SCHEDULING_STEPS = (
    _normalize_dates,
    _check_range,
    _check_not_past,
    _resolve_seat,
    _check_seat_free,
    _resolve_employee,
    _check_employee_free,
)


def _run_steps(db: Session, ctx: _Pipeline) -> Optional[ServiceError]:
    for step in SCHEDULING_STEPS:
        try:
            error = step(db, ctx)
        except SQLAlchemyError as e:
            return _store_failure(db, e, "Buchung konnte nicht geprüft werden")
        if error is not None:
            logger.info(f"Buchung abgelehnt ({step.__name__}): {error.kind.value} - {error.message}")
            return error
    return None


def create_scheduled(db: Session, data: ScheduledSeatCreate) -> ScheduledSeat | ServiceError:
    """
    Neue Buchung anlegen. Ablauf (bricht beim ersten Fehler ab):
    Datum normalisieren -> Zeitraum prüfen -> nicht in der Vergangenheit ->
    Platz auflösen -> Platz frei? -> Mitarbeiter auflösen -> Mitarbeiter frei?
    """
    ctx = _Pipeline(data=data)
    error = _run_steps(db, ctx)
    if error:
        return error

    new_scheduled = ScheduledSeat(
        seat_id=ctx.seat.id,
        employee_id=ctx.employee.id,
        start_date=ctx.start_date,
        end_date=ctx.end_date,
        repeat_every=data.repeat_every
    )
    try:
        db.add(new_scheduled)
        db.commit()
    except SQLAlchemyError as e:
        return _store_failure(db, e)

    logger.info(f"Buchung {new_scheduled.id} angelegt: Platz {ctx.seat.number}, {ctx.start_date} bis {ctx.end_date}")
    return find_scheduled_by_id(db, new_scheduled.id)


def update_scheduled_by_id(db: Session, scheduled_id: Union[UUID, str], data: ScheduledSeatCreate) -> ScheduledSeat | ServiceError:
    """Wie create_scheduled, aber die Buchung selbst wird bei den Konfliktprüfungen ausgenommen."""
    scheduled = find_scheduled_by_id(db, scheduled_id)
    if is_error(scheduled):
        return scheduled

    ctx = _Pipeline(data=data, except_id=scheduled.id)
    error = _run_steps(db, ctx)
    if error:
        return error

    scheduled.seat_id = ctx.seat.id
    scheduled.employee_id = ctx.employee.id
    scheduled.start_date = ctx.start_date
    scheduled.end_date = ctx.end_date
    scheduled.repeat_every = data.repeat_every
    try:
        db.commit()
    except SQLAlchemyError as e:
        return _store_failure(db, e)

    logger.info(f"Buchung {scheduled.id} geändert: Platz {ctx.seat.number}, {ctx.start_date} bis {ctx.end_date}")
    return find_scheduled_by_id(db, scheduled.id)


def delete_scheduled_by_id(db: Session, scheduled_id: Union[UUID, str]) -> UUID | ServiceError:
    scheduled = find_scheduled_by_id(db, scheduled_id)
    if is_error(scheduled):
        return scheduled

    deleted_id = scheduled.id
    try:
        db.delete(scheduled)
        db.commit()
    except SQLAlchemyError as e:
        return _store_failure(db, e)

    logger.info(f"Buchung {deleted_id} gelöscht")
    return deleted_id
