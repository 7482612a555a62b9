from .reservation_factory import PackageDetails as PackageDetails
from .reservation_factory import PassengerDetails as PassengerDetails
from .reservation_factory import ReservationFactory as ReservationFactory
