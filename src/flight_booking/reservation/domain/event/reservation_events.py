from dataclasses import dataclass

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.value_object import (
    PassengerId,
    ReservationId,
    SeatLabel,
)


@dataclass(frozen=True)
class ReservationCreated:
    """予約が作成された"""

    reservation_id: ReservationId
    flight_id: FlightId
    seats: tuple[SeatLabel, ...]


@dataclass(frozen=True)
class PassengerPackageChanged:
    """乗客のオプションが変更された（座席の解放・確保を含む）"""

    reservation_id: ReservationId
    passenger_id: PassengerId
    previous_seat: SeatLabel | None
    current_seat: SeatLabel | None


@dataclass(frozen=True)
class ReservationConfirmed:
    """予約が確定した"""

    reservation_id: ReservationId


@dataclass(frozen=True)
class ReservationCancelled:
    """予約がキャンセルされ、保持していた座席が解放された"""

    reservation_id: ReservationId
    flight_id: FlightId
    released_seats: tuple[SeatLabel, ...]
