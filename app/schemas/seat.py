from pydantic import BaseModel
from uuid import UUID
from typing import Optional

class SeatInfo(BaseModel):
    id: UUID
    number: int
    model_config = {"from_attributes": True}

class SeatLookup(BaseModel):
    """Suchkriterien: id hat Vorrang, sonst Nummer (optional eingeschränkt auf eine Reihe)"""
    id: Optional[UUID] = None
    number: Optional[int] = None
    row_id: Optional[UUID] = None

class SeatCreate(BaseModel):
    number: int
    description: Optional[str] = None
    row_id: Optional[UUID] = None

class SeatResponse(BaseModel):
    id: UUID
    number: int
    description: Optional[str]
    row_id: Optional[UUID]

    model_config = {"from_attributes": True}
