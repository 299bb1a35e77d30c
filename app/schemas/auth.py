from pydantic import BaseModel, Field
from uuid import UUID

from app.schemas.employee import EmployeeResponse

MIN_PASSWORD_LENGTH=8

class LoginRequest(BaseModel):
    email: str
    password: str

# Registrierung nur für bestehende Mitarbeiter, Namen müssen zum Datensatz passen
class RegisterRequest(BaseModel):
    email: str
    first_name: str
    last_name: str
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)

class TokenResponse(BaseModel):
    access_token: str
    token_type: str ="bearer"
    name: str
    email: str

class UserResponse(BaseModel):
    id: UUID
    employee: EmployeeResponse

    model_config = {"from_attributes": True}
