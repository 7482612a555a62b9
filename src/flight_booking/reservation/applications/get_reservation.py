from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.exception import ReservationNotFoundException
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import ReservationId


class GetReservationService:
    """予約参照サービス"""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def get(self, reservation_id: ReservationId) -> Reservation:
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundException(reservation_id)
        return reservation


class ListReservationsService:
    """予約一覧サービス"""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def list(self, flight_id: FlightId | None = None) -> list[Reservation]:
        """予約を作成日時の新しい順に返す"""
        reservations = self._repository.list_all(flight_id)
        return sorted(reservations, key=lambda r: r.created_at.value, reverse=True)
