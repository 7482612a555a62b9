from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightSearchCriteria


class SearchFlightsService:
    """フライト検索サービス"""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def search(self, criteria: FlightSearchCriteria) -> list[Flight]:
        """条件に一致するフライトを出発時刻順に返す

        条件が空の場合は検索を行わず空のリストを返す。
        """
        if criteria.is_empty():
            return []

        flights = [
            flight
            for flight in self._repository.list_all()
            if criteria.matches(
                origin=flight.origin,
                destination=flight.destination,
                departure_date=flight.departure_time.date(),
            )
        ]
        return sorted(flights, key=lambda flight: flight.departure_time.value)
