from .baggage_item import BaggageItem
from .optional_package import OptionalPackage
from .package_price import PackagePrice
from .passenger_id import PassengerId
from .price_table import PriceTable
from .reservation_id import ReservationId
from .reservation_totals import ReservationTotals
from .seat_availability import SeatAvailability
from .seat_label import SeatLabel

__all__ = [
    "BaggageItem",
    "OptionalPackage",
    "PackagePrice",
    "PassengerId",
    "PriceTable",
    "ReservationId",
    "ReservationTotals",
    "SeatAvailability",
    "SeatLabel",
]
