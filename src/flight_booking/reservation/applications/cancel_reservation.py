from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.exception import ReservationNotFoundException
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import ReservationId


class CancelReservationService:
    """予約キャンセルサービス

    合計金額は再計算しない。座席は有効な予約から外れることで解放される。
    """

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def cancel(self, reservation_id: ReservationId) -> Reservation:
        """予約をキャンセルする（既にキャンセル済みなら何もしない）"""
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundException(reservation_id)
        if not reservation.is_active:
            return reservation

        expected_status = reservation.status
        reservation.cancel()
        self._repository.update_status(reservation, expected_status=expected_status)
        return reservation
