from .flight_id import FlightId
from .flight_number import FlightNumber
from .flight_search_criteria import FlightSearchCriteria

__all__ = ["FlightId", "FlightNumber", "FlightSearchCriteria"]
