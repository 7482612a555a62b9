from abc import abstractmethod

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトレポジトリ"""

    @abstractmethod
    def save(self, flight: Flight) -> None:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Flight]:
        """全フライトを出発時刻の昇順で返す"""
        raise NotImplementedError
