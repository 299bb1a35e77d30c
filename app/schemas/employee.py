from pydantic import BaseModel
from uuid import UUID
from typing import Optional

class EmployeeLookup(BaseModel):
    """Suchkriterien: id, dann email, dann Vor- und/oder Nachname"""
    id: Optional[UUID] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

class EmployeeCreate(BaseModel):
    first_name: str
    last_name: str
    email: str

class EmployeeResponse(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str

    model_config = {"from_attributes": True}
