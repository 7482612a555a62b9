from collections.abc import Sequence

from flight_booking.flight.domain.exception import FlightNotFoundException
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.exception import (
    DuplicateSeatException,
    SeatConflictException,
)
from flight_booking.reservation.domain.factory import (
    PassengerDetails,
    ReservationFactory,
)
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.service import ReservationPricer, SeatLedger


class CreateReservationService:
    """予約作成のユースケース

    フライトの存在・販売状況の確認 -> 座席の競合チェック -> 金額計算 -> 永続化
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

    def reserve(
        self,
        flight_id: FlightId,
        passengers: Sequence[PassengerDetails],
        notes: str = "",
    ) -> Reservation:
        """フライトを予約する"""
        flight = self._flight_repository.find_by_id(flight_id)
        if flight is None:
            raise FlightNotFoundException(flight_id)
        flight.ensure_bookable()

        reservation = self._factory.create(flight, passengers, notes)
        self._ledger.try_reserve_all(flight, sorted(reservation.seat_labels()))
        reservation.reprice(self._pricer)

        try:
            self._reservation_repository.save(reservation)
        except DuplicateSeatException as e:
            # 事前チェックと書き込みの間に他の予約が座席を確保した
            raise SeatConflictException(
                e.seat, self._ledger.occupied_seats(flight.id)
            ) from e
        return reservation
