from .exceptions import FlightNotFoundException as FlightNotFoundException
from .exceptions import FlightUnavailableException as FlightUnavailableException
