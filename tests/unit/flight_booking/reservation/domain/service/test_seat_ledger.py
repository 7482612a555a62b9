import pytest

from flight_booking.flight.domain.exception import FlightUnavailableException
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.exception import SeatConflictException
from flight_booking.reservation.domain.value_object import SeatLabel


class TestSeatLedger:
    """SeatLedger のテスト"""

    @pytest.fixture
    def flight(self, create_flight):
        return create_flight(seat_capacity=3)

    @pytest.fixture
    def hold(self, reservation_repository, create_reservation, passenger_details, flight):
        """指定した座席を持つ予約を保存する"""

        def _hold(*seats, status=ReservationStatus.PENDING):
            reservation = create_reservation(
                flight=flight,
                passengers=[passenger_details(seat=seat) for seat in seats],
                status=status,
            )
            reservation_repository.put(reservation)
            return reservation

        return _hold

    def test_occupied_seats_is_union_of_active_reservations(self, ledger, hold, flight):
        hold("1A")
        hold("2B", status=ReservationStatus.CONFIRMED)
        hold("3C", status=ReservationStatus.CANCELLED)

        assert ledger.occupied_seats(flight.id) == {SeatLabel("1A"), SeatLabel("2B")}

    def test_exclude_own_reservation(self, ledger, hold, flight):
        reservation = hold("1A")
        assert ledger.occupied_seats(flight.id, exclude_reservation_id=reservation.id) == set()

    def test_try_reserve_free_seat(self, ledger, hold, flight):
        hold("1A")
        assert ledger.try_reserve(flight, " 2b ") == SeatLabel("2B")

    def test_try_reserve_held_seat_raises_conflict(self, ledger, hold, flight):
        hold("1A")
        with pytest.raises(SeatConflictException) as exc_info:
            ledger.try_reserve(flight, "1a")
        assert exc_info.value.seat == "1A"
        assert exc_info.value.occupied_seats == ["1A"]

    def test_own_seat_is_available_when_excluded(self, ledger, hold, flight):
        """予約の編集では自分の現在の座席を選び直せる"""
        reservation = hold("1A")
        assert ledger.try_reserve(flight, "1A", reservation.id) == SeatLabel("1A")

    def test_cancelled_seat_is_released(self, ledger, hold, flight):
        hold("1A", status=ReservationStatus.CANCELLED)
        assert ledger.try_reserve(flight, "1A") == SeatLabel("1A")

    def test_duplicate_seats_in_same_request(self, ledger, flight):
        with pytest.raises(SeatConflictException):
            ledger.try_reserve_all(flight, ["1A", "1a"])

    def test_capacity_exceeded(self, ledger, hold, flight):
        hold("1A", "1B")
        with pytest.raises(FlightUnavailableException, match="only 1 seat"):
            ledger.try_reserve_all(flight, ["2A", "2B"])

    @pytest.fixture
    def full_flight_reservation(
        self, reservation_repository, create_reservation, passenger_details, flight, hold
    ):
        """1A の乗客と座席未指定の乗客を持つ予約（他の予約と合わせて満席）"""
        reservation = create_reservation(
            flight=flight,
            passengers=[
                passenger_details(seat="1A"),
                passenger_details(full_name="Maria Clara"),
            ],
        )
        reservation_repository.put(reservation)
        hold("2B", "3C")
        return reservation

    def test_capacity_on_edit_counts_other_passengers_of_same_reservation(
        self, ledger, flight, full_flight_reservation
    ):
        """編集中の予約の他の乗客が持つ座席も座席数の上限に数える"""
        seatless = full_flight_reservation.passengers[1]

        with pytest.raises(FlightUnavailableException, match="only 0 seat"):
            ledger.try_reserve(
                flight,
                "4D",
                exclude_reservation_id=full_flight_reservation.id,
                exclude_passenger_id=seatless.id,
            )

    def test_edited_passenger_can_move_seat_on_full_flight(
        self, ledger, flight, full_flight_reservation
    ):
        """編集中の乗客自身の座席は空きとして扱う"""
        seated = full_flight_reservation.passengers[0]

        assert ledger.try_reserve(
            flight,
            "4D",
            exclude_reservation_id=full_flight_reservation.id,
            exclude_passenger_id=seated.id,
        ) == SeatLabel("4D")
        assert ledger.try_reserve(
            flight,
            "1A",
            exclude_reservation_id=full_flight_reservation.id,
            exclude_passenger_id=seated.id,
        ) == SeatLabel("1A")

    def test_no_seats_requested(self, ledger, flight):
        assert ledger.try_reserve_all(flight, []) == ()

    def test_availability(self, ledger, hold, flight):
        hold("2B", "1A")

        availability = ledger.availability(flight)

        assert availability.seat_capacity == 3
        assert availability.occupied_seats == (SeatLabel("1A"), SeatLabel("2B"))
        assert availability.available_count == 1
        assert availability.is_occupied(SeatLabel("1A"))
