from sqlalchemy import Column, String, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
import uuid

from app.database import Base

class Row(Base):
    __tablename__ = "rows"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    number = Column(Integer, nullable=False)
    name = Column(String(100), nullable=True)
    area_id = Column(Uuid, ForeignKey("areas.id"), nullable=False)

    area = relationship("Area", back_populates="rows")
    seats = relationship("Seat", back_populates="row")
