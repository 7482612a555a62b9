from .reservation_pricer import ReservationPricer as ReservationPricer
from .seat_ledger import SeatLedger as SeatLedger
