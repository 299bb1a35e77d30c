import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from app.schemas.employee import EmployeeLookup
from app.models import User
from app.services.employee_service import find_employee
from app.services.results import is_error
from app.utils.security import verify_password, create_access_token, get_current_user, hash_password

logger = logging.getLogger("app.routers.auth")

router = APIRouter(prefix="/auth", tags=["auth"])


# Registrierung: nur für Mitarbeiter die schon im System sind
@router.post("/register", response_model=UserResponse)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    employee = find_employee(db, EmployeeLookup(email=data.email))
    if is_error(employee):
        raise HTTPException(status_code=404, detail=employee.message)

    existing = db.query(User).filter(User.employee_id == employee.id).first()
    if existing:
        raise HTTPException(status_code=400, detail="Email bereits registriert")

    if employee.first_name != data.first_name or employee.last_name != data.last_name:
        raise HTTPException(status_code=400, detail="Vor- oder Nachname passt nicht zum Mitarbeiter mit dieser Email")

    new_user = User(employee_id=employee.id, password_hash=hash_password(data.password))
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info(f"User für Mitarbeiter {employee.email} registriert")
    return new_user


@router.post("/login", response_model=TokenResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    employee = find_employee(db, EmployeeLookup(email=credentials.email))
    if is_error(employee):
        raise HTTPException(status_code=401, detail="Email oder Passwort falsch")
    user = db.query(User).filter(User.employee_id == employee.id).first()
    if not user:
        raise HTTPException(status_code=401, detail="Email oder Passwort falsch")
    if not verify_password(credentials.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Email oder Passwort falsch")

    access_token = create_access_token({"sub": str(user.id)})
    return TokenResponse(
        access_token=access_token,
        name=f"{employee.first_name} {employee.last_name}",
        email=employee.email
    )


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
