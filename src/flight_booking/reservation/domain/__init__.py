from .entity import Passenger as Passenger
from .entity import Reservation as Reservation
from .enum import Meal as Meal
from .enum import ReservationStatus as ReservationStatus
from .enum import SeatClass as SeatClass
from .factory import PackageDetails as PackageDetails
from .factory import PassengerDetails as PassengerDetails
from .factory import ReservationFactory as ReservationFactory
from .repository import ReservationRepository as ReservationRepository
from .service import ReservationPricer as ReservationPricer
from .service import SeatLedger as SeatLedger
from .value_object import OptionalPackage as OptionalPackage
from .value_object import PassengerId as PassengerId
from .value_object import PriceTable as PriceTable
from .value_object import ReservationId as ReservationId
from .value_object import ReservationTotals as ReservationTotals
from .value_object import SeatLabel as SeatLabel
