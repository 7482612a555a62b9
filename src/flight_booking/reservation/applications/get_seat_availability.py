from flight_booking.flight.domain.exception import FlightNotFoundException
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.service import SeatLedger
from flight_booking.reservation.domain.value_object import SeatAvailability


class GetSeatAvailabilityService:
    """座席の空き状況を返すサービス（予約フォームの座席表示用）"""

    def __init__(self, flight_repository: FlightRepository, ledger: SeatLedger) -> None:
        self._flight_repository = flight_repository
        self._ledger = ledger

    def get(self, flight_id: FlightId) -> SeatAvailability:
        flight = self._flight_repository.find_by_id(flight_id)
        if flight is None:
            raise FlightNotFoundException(flight_id)
        return self._ledger.availability(flight)
