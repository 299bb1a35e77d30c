from sqlalchemy import Column, String, Integer, Uuid
from sqlalchemy.orm import relationship
import uuid

from app.database import Base

class Office(Base):
    __tablename__ = "offices"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    number = Column(Integer, nullable=False, unique=True)
    name = Column(String(100), nullable=True)

    areas = relationship("Area", back_populates="office")
