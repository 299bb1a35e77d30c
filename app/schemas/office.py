from pydantic import BaseModel
from uuid import UUID
from typing import Optional

class OfficeCreate(BaseModel):
    number: int
    name: Optional[str] = None

class OfficeResponse(BaseModel):
    id: UUID
    number: int
    name: Optional[str]

    model_config = {"from_attributes": True}

class AreaCreate(BaseModel):
    number: int
    name: Optional[str] = None
    office_id: UUID

class AreaResponse(BaseModel):
    id: UUID
    number: int
    name: Optional[str]
    office_id: UUID

    model_config = {"from_attributes": True}

class RowCreate(BaseModel):
    number: int
    name: Optional[str] = None
    area_id: UUID

class RowResponse(BaseModel):
    id: UUID
    number: int
    name: Optional[str]
    area_id: UUID

    model_config = {"from_attributes": True}
