from flight_booking.flight.domain.exception import FlightNotFoundException
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.exception import (
    DuplicateSeatException,
    ReservationNotFoundException,
    SeatConflictException,
)
from flight_booking.reservation.domain.factory import (
    PackageDetails,
    ReservationFactory,
)
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.service import ReservationPricer, SeatLedger
from flight_booking.reservation.domain.value_object import PassengerId, ReservationId


class UpdateOptionalPackageService:
    """乗客のオプション変更のユースケース

    乗客の特定 -> 自分の予約を除いた座席の競合チェック -> 金額の再計算 -> 永続化
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        reservation_repository: ReservationRepository,
        factory: ReservationFactory,
        ledger: SeatLedger,
        pricer: ReservationPricer,
    ) -> None:
        self._flight_repository = flight_repository
        self._reservation_repository = reservation_repository
        self._factory = factory
        self._ledger = ledger
        self._pricer = pricer

    def update(
        self,
        reservation_id: ReservationId,
        passenger_id: PassengerId,
        package_details: PackageDetails,
    ) -> Reservation:
        """乗客のオプションを変更する

        座席が現在と同じでも競合チェックを行う。自分の予約は除外されるため成功する。
        座席数の上限は、同じ予約の他の乗客の座席も含めて判定する。
        """
        package = self._factory.build_package(package_details)

        reservation = self._reservation_repository.find_by_id(reservation_id)
        if reservation is None:
            raise ReservationNotFoundException(reservation_id)

        previous_seat = reservation.passenger(passenger_id).seat

        if package.seat is not None and reservation.is_active:
            flight = self._flight_repository.find_by_id(reservation.flight_id)
            if flight is None:
                raise FlightNotFoundException(reservation.flight_id)
            self._ledger.try_reserve(
                flight,
                package.seat,
                exclude_reservation_id=reservation.id,
                exclude_passenger_id=passenger_id,
            )

        reservation.change_package(passenger_id, package)
        reservation.reprice(self._pricer)

        try:
            self._reservation_repository.update_passenger_package(
                reservation, passenger_id, previous_seat
            )
        except DuplicateSeatException as e:
            raise SeatConflictException(
                e.seat, self._ledger.occupied_seats(reservation.flight_id)
            ) from e
        return reservation
