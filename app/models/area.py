from sqlalchemy import Column, String, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
import uuid

from app.database import Base

class Area(Base):
    __tablename__ = "areas"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    number = Column(Integer, nullable=False)
    name = Column(String(100), nullable=True)
    office_id = Column(Uuid, ForeignKey("offices.id"), nullable=False)

    office = relationship("Office", back_populates="areas")
    rows = relationship("Row", back_populates="area")
