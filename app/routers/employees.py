from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from uuid import UUID
from typing import Optional

from app.database import get_db
from app.models import Employee
from app.schemas.employee import EmployeeCreate, EmployeeResponse

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/", response_model=list[EmployeeResponse])
def get_all_employees(
    email: Optional[str] = None,
    name: Optional[str] = None,
    db: Session = Depends(get_db)
):
    query = db.query(Employee)
    if email:
        query = query.filter(Employee.email == email)
    if name:
        query = query.filter(
            Employee.first_name.ilike(f"%{name}%") | Employee.last_name.ilike(f"%{name}%")
        )
    return query.order_by(Employee.last_name).all()


@router.get("/{id}", response_model=EmployeeResponse)
def get_employee(id: UUID, db: Session = Depends(get_db)):
    employee = db.query(Employee).filter(Employee.id == id).first()
    if not employee:
        raise HTTPException(status_code=404, detail="Mitarbeiter nicht gefunden")
    return employee


@router.post("/", response_model=EmployeeResponse)
def create_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    existing = db.query(Employee).filter(Employee.email == employee.email).first()
    if existing:
        raise HTTPException(status_code=400, detail="Email bereits vergeben")

    new_employee = Employee(**employee.model_dump())
    db.add(new_employee)
    db.commit()
    db.refresh(new_employee)
    return new_employee
