from collections.abc import Iterable

from flight_booking.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)


class SeatConflictException(DuplicateResourceException):
    """座席が既に他の有効な予約に割り当てられている

    呼び出し側は別の座席を選び直すことで回復できる。自動リトライはしない。
    """

    error_code = "SEAT_CONFLICT"

    def __init__(self, seat: object, occupied_seats: Iterable[object] = ()) -> None:
        super().__init__(f"Seat {seat} is no longer available. Please choose another seat.")
        self.seat = str(seat)
        self.occupied_seats = sorted(str(s) for s in occupied_seats)

    def details(self) -> dict | None:
        return {"seat": self.seat, "occupied_seats": self.occupied_seats}


class DuplicateSeatException(DuplicateResourceException):
    """ストレージの一意制約 (フライト, 座席) 違反

    永続化層が送出し、アプリケーション層で SeatConflictException に変換される。
    """

    error_code = "DUPLICATE_SEAT"

    def __init__(self, flight_id: object, seat: object) -> None:
        super().__init__(f"Seat {seat} on flight {flight_id} is already held")
        self.flight_id = str(flight_id)
        self.seat = str(seat)


class ReservationNotFoundException(ResourceNotFoundException):
    """指定された予約が存在しない"""

    error_code = "RESERVATION_NOT_FOUND"

    def __init__(self, reservation_id: object) -> None:
        super().__init__(f"Reservation not found: {reservation_id}")
        self.reservation_id = str(reservation_id)


class PassengerNotFoundException(ResourceNotFoundException):
    """予約内に指定された乗客が存在しない"""

    error_code = "PASSENGER_NOT_FOUND"

    def __init__(self, reservation_id: object, passenger_id: object) -> None:
        super().__init__(
            f"Passenger {passenger_id} not found in reservation {reservation_id}"
        )
        self.reservation_id = str(reservation_id)
        self.passenger_id = str(passenger_id)
