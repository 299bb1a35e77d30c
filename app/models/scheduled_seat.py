import uuid

from sqlalchemy import Column, Date, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from app.database import Base


class ScheduledSeat(Base):
    """
    Buchung eines Platzes durch einen Mitarbeiter für einen geschlossenen Zeitraum.
    start_date und end_date sind Kalendertage, beide inklusive.
    repeat_every (in Tagen) ist nur ein Hinweis für die Anzeige, es werden
    keine Folgetermine erzeugt.
    """
    __tablename__ = "scheduled_seats"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    seat_id = Column(Uuid, ForeignKey("seats.id"), nullable=False)
    seat = relationship("Seat")
    employee_id = Column(Uuid, ForeignKey("employees.id"), nullable=False)
    employee = relationship("Employee")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    repeat_every = Column(Integer, nullable=True)
