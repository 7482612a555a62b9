from .meal import Meal as Meal
from .reservation_status import ReservationStatus as ReservationStatus
from .seat_class import SeatClass as SeatClass
