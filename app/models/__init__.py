from app.models.office import Office
from app.models.area import Area
from app.models.row import Row
from app.models.seat import Seat
from app.models.employee import Employee
from app.models.user import User
from app.models.scheduled_seat import ScheduledSeat
