import logging
from uuid import UUID
from typing import Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Employee
from app.schemas.employee import EmployeeLookup
from app.services.results import ServiceError, not_found, INVALID_ID_MESSAGE
from app.utils.ids import parse_id

logger = logging.getLogger("app.services.employee_service")


def find_employee_by_id(db: Session, employee_id: Union[UUID, str]) -> Employee | ServiceError:
    uid = parse_id(employee_id)
    if uid is None:
        return not_found(INVALID_ID_MESSAGE)
    try:
        employee = db.get(Employee, uid)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"DB-Fehler beim Laden von Mitarbeiter {employee_id}: {e}")
        return not_found(INVALID_ID_MESSAGE)
    if not employee:
        return not_found("Mitarbeiter nicht gefunden")
    return employee


def find_employee(db: Session, criteria: EmployeeLookup) -> Employee | ServiceError:
    """
    Reihenfolge: id -> email -> Vor-/Nachname.
    Bei mehreren Treffern über den Namen wird nichts geraten.
    """
    if criteria.id:
        return find_employee_by_id(db, criteria.id)

    if criteria.email:
        employee = db.query(Employee).filter(Employee.email == criteria.email).first()
        if not employee:
            return not_found(f"Kein Mitarbeiter mit der Email {criteria.email}")
        return employee

    if not criteria.first_name and not criteria.last_name:
        return not_found("Kein Mitarbeiter angegeben")

    query = db.query(Employee)
    if criteria.first_name:
        query = query.filter(Employee.first_name == criteria.first_name)
    if criteria.last_name:
        query = query.filter(Employee.last_name == criteria.last_name)
    employees = query.limit(2).all()

    if not employees:
        return not_found("Mitarbeiter nicht gefunden")
    if len(employees) > 1:
        return not_found("Mitarbeiter ist über den Namen nicht eindeutig, bitte Email angeben")
    return employees[0]
