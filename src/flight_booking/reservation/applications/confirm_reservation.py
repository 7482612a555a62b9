from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.exception import ReservationNotFoundException
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import ReservationId


class ConfirmReservationService:
    """予約確定サービス"""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def confirm(self, reservation_id: ReservationId) -> Reservation:
        """予約を確定する"""
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundException(reservation_id)
        if reservation.status == ReservationStatus.CONFIRMED:
            return reservation

        expected_status = reservation.status
        reservation.confirm()
        self._repository.update_status(reservation, expected_status=expected_status)
        return reservation
