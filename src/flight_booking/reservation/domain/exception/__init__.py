from .exceptions import DuplicateSeatException as DuplicateSeatException
from .exceptions import PassengerNotFoundException as PassengerNotFoundException
from .exceptions import ReservationNotFoundException as ReservationNotFoundException
from .exceptions import SeatConflictException as SeatConflictException
