from .entity import Flight as Flight
from .enum import FlightStatus as FlightStatus
from .exception import FlightNotFoundException as FlightNotFoundException
from .exception import FlightUnavailableException as FlightUnavailableException
from .repository import FlightRepository as FlightRepository
from .value_object import FlightId as FlightId
from .value_object import FlightNumber as FlightNumber
from .value_object import FlightSearchCriteria as FlightSearchCriteria
