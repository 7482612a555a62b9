from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.exception import ReservationNotFoundException
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.service import ReservationPricer
from flight_booking.reservation.domain.value_object import PassengerId, ReservationId


class RemoveOptionalPackageService:
    """乗客のオプションを取り消すユースケース（座席指定も解除される）"""

    def __init__(
        self, repository: ReservationRepository, pricer: ReservationPricer
    ) -> None:
        self._repository = repository
        self._pricer = pricer

    def remove(self, reservation_id: ReservationId, passenger_id: PassengerId) -> Reservation:
        """乗客のオプションを初期状態に戻す"""
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundException(reservation_id)

        previous_seat = reservation.passenger(passenger_id).seat
        reservation.remove_package(passenger_id)
        reservation.reprice(self._pricer)

        self._repository.update_passenger_package(reservation, passenger_id, previous_seat)
        return reservation
