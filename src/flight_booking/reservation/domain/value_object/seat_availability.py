from dataclasses import dataclass

from flight_booking.flight.domain.value_object import FlightId

from .seat_label import SeatLabel


@dataclass(frozen=True)
class SeatAvailability:
    """フライトの座席占有状況（有効な予約から導出したスナップショット）"""

    flight_id: FlightId
    seat_capacity: int
    occupied_seats: tuple[SeatLabel, ...]

    @property
    def available_count(self) -> int:
        return max(self.seat_capacity - len(self.occupied_seats), 0)

    def is_occupied(self, seat: SeatLabel) -> bool:
        return seat in self.occupied_seats
