from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from uuid import UUID
from typing import Optional

from app.database import get_db
from app.models import Office, Area, Row, User
from app.utils.security import get_current_user
from app.schemas.office import (
    OfficeCreate, OfficeResponse,
    AreaCreate, AreaResponse,
    RowCreate, RowResponse
)

# Büro -> Bereich -> Reihe, die Plätze hängen an der Reihe
router = APIRouter(tags=["floorplan"])


# ============ OFFICES ============

@router.get("/offices/", response_model=list[OfficeResponse])
def get_all_offices(number: Optional[int] = None, db: Session = Depends(get_db)):
    query = db.query(Office)
    if number is not None:
        query = query.filter(Office.number == number)
    return query.order_by(Office.number).all()


@router.get("/offices/{id}", response_model=OfficeResponse)
def get_office(id: UUID, db: Session = Depends(get_db)):
    office = db.query(Office).filter(Office.id == id).first()
    if not office:
        raise HTTPException(status_code=404, detail="Büro nicht gefunden")
    return office


@router.post("/offices/", response_model=OfficeResponse)
def create_office(office: OfficeCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    existing = db.query(Office).filter(Office.number == office.number).first()
    if existing:
        raise HTTPException(status_code=400, detail="Büronummer existiert bereits")
    new_office = Office(**office.model_dump())
    db.add(new_office)
    db.commit()
    db.refresh(new_office)
    return new_office


# ============ AREAS ============

@router.get("/areas/", response_model=list[AreaResponse])
def get_all_areas(office_id: Optional[UUID] = None, db: Session = Depends(get_db)):
    query = db.query(Area)
    if office_id:
        query = query.filter(Area.office_id == office_id)
    return query.order_by(Area.number).all()


@router.get("/areas/{id}", response_model=AreaResponse)
def get_area(id: UUID, db: Session = Depends(get_db)):
    area = db.query(Area).filter(Area.id == id).first()
    if not area:
        raise HTTPException(status_code=404, detail="Bereich nicht gefunden")
    return area


@router.post("/areas/", response_model=AreaResponse)
def create_area(area: AreaCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    office = db.query(Office).filter(Office.id == area.office_id).first()
    if not office:
        raise HTTPException(status_code=404, detail="Büro nicht gefunden")
    new_area = Area(**area.model_dump())
    db.add(new_area)
    db.commit()
    db.refresh(new_area)
    return new_area


# ============ ROWS ============

@router.get("/rows/", response_model=list[RowResponse])
def get_all_rows(area_id: Optional[UUID] = None, db: Session = Depends(get_db)):
    query = db.query(Row)
    if area_id:
        query = query.filter(Row.area_id == area_id)
    return query.order_by(Row.number).all()


@router.get("/rows/{id}", response_model=RowResponse)
def get_row(id: UUID, db: Session = Depends(get_db)):
    row = db.query(Row).filter(Row.id == id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Reihe nicht gefunden")
    return row


@router.post("/rows/", response_model=RowResponse)
def create_row(row: RowCreate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    area = db.query(Area).filter(Area.id == row.area_id).first()
    if not area:
        raise HTTPException(status_code=404, detail="Bereich nicht gefunden")
    new_row = Row(**row.model_dump())
    db.add(new_row)
    db.commit()
    db.refresh(new_row)
    return new_row
