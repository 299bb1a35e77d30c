from sqlalchemy import Column, String, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship
import uuid

from app.database import Base

class Seat(Base):
    __tablename__ = "seats"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    number = Column(Integer, nullable=False)
    description = Column(String(255), nullable=True)
    row_id = Column(Uuid, ForeignKey("rows.id"), nullable=True)

    row = relationship("Row", back_populates="seats")
