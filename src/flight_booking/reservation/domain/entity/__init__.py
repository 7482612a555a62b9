from .passenger import Passenger as Passenger
from .reservation import Reservation as Reservation
