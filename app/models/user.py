from sqlalchemy import Column, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship

import uuid

from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    employee_id = Column(Uuid, ForeignKey("employees.id"), nullable=False, unique=True)
    employee = relationship("Employee")
    password_hash = Column(String(255), nullable=False)
